"""Client for the maze simulator's line-based text protocol."""

from __future__ import annotations

import re
from typing import TextIO

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text: str) -> int:
    """Read a leading integer the lenient way: junk after it is ignored, no digits gives 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class Simulator:
    """Sends commands to the simulator on *stdout* and reads its replies from *stdin*."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._in = stdin
        self._out = stdout

    def _send(self, line: str) -> None:
        self._out.write(line + "\n")
        self._out.flush()

    def _ask(self, command: str) -> str:
        self._send(command)
        reply = self._in.readline()
        if not reply:
            raise EOFError(f"simulator gave no reply to {command!r}")
        return reply

    def _ask_int(self, command: str) -> int:
        return _parse_int(self._ask(command))

    def _ask_bool(self, command: str) -> bool:
        return self._ask(command) == "true\n"

    def _ask_ack(self, command: str) -> bool:
        return self._ask(command) == "ack\n"

    def maze_width(self) -> int:
        return self._ask_int("mazeWidth")

    def maze_height(self) -> int:
        return self._ask_int("mazeHeight")

    def wall_front(self) -> bool:
        return self._ask_bool("wallFront")

    def wall_right(self) -> bool:
        return self._ask_bool("wallRight")

    def wall_left(self) -> bool:
        return self._ask_bool("wallLeft")

    def move_forward(self) -> bool:
        """Move one cell ahead; False means the mouse crashed into a wall."""
        return self._ask_ack("moveForward")

    def turn_right(self) -> None:
        self._ask_ack("turnRight")

    def turn_left(self) -> None:
        self._ask_ack("turnLeft")

    def set_wall(self, x: int, y: int, direction: str) -> None:
        self._send(f"setWall {x} {y} {direction}")

    def clear_wall(self, x: int, y: int, direction: str) -> None:
        self._send(f"clearWall {x} {y} {direction}")

    def set_color(self, x: int, y: int, color: str) -> None:
        self._send(f"setColor {x} {y} {color}")

    def clear_color(self, x: int, y: int) -> None:
        self._send(f"clearColor {x} {y}")

    def clear_all_color(self) -> None:
        self._send("clearAllColor")

    def set_text(self, x: int, y: int, text: str) -> None:
        self._send(f"setText {x} {y} {text}")

    def clear_text(self, x: int, y: int) -> None:
        self._send(f"clearText {x} {y}")

    def clear_all_text(self) -> None:
        self._send("clearAllText")

    def was_reset(self) -> bool:
        return self._ask_bool("wasReset")

    def ack_reset(self) -> None:
        self._ask_ack("ackReset")