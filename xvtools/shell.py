"""Command-line parser for the shell: pipes, lists, background jobs and redirections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from .params import OpenFlag

MAXARGS = 10

WHITESPACE = " \t\r\n\v"
SYMBOLS = "<|>&;()"

# Token kinds: a symbol character, "+" for ">>", or "a" for a word.
WORD = "a"
APPEND = "+"


class ShellSyntaxError(ValueError):
    """Raised when a command line cannot be parsed."""


@dataclass
class ExecCmd:
    """Run a program with arguments."""

    argv: List[str] = field(default_factory=list)


@dataclass
class RedirCmd:
    """Run cmd with file descriptor fd reopened on file."""

    cmd: "Command"
    file: str
    mode: OpenFlag
    fd: int


@dataclass
class PipeCmd:
    """Connect left's standard output to right's standard input."""

    left: "Command"
    right: "Command"


@dataclass
class ListCmd:
    """Run left, wait for it, then run right."""

    left: "Command"
    right: "Command"


@dataclass
class BackCmd:
    """Run cmd without waiting for it."""

    cmd: "Command"


Command = Union[ExecCmd, RedirCmd, PipeCmd, ListCmd, BackCmd]


class _Parser:
    def __init__(self, s: str) -> None:
        self.s = s
        self.pos = 0
        self.end = len(s)

    def _skip_ws(self) -> None:
        while self.pos < self.end and self.s[self.pos] in WHITESPACE:
            self.pos += 1

    def peek(self, toks: str) -> bool:
        self._skip_ws()
        return self.pos < self.end and self.s[self.pos] in toks

    def gettoken(self) -> Tuple[Optional[str], str]:
        self._skip_ws()
        start = self.pos
        if start >= self.end:
            return None, ""
        c = self.s[start]
        if c in "|();&<":
            kind = c
            self.pos += 1
        elif c == ">":
            kind = ">"
            self.pos += 1
            if self.pos < self.end and self.s[self.pos] == ">":
                kind = APPEND
                self.pos += 1
        else:
            kind = WORD
            while (self.pos < self.end
                   and self.s[self.pos] not in WHITESPACE
                   and self.s[self.pos] not in SYMBOLS):
                self.pos += 1
        text = self.s[start:self.pos]
        self._skip_ws()
        return kind, text

    def parse_line(self) -> Command:
        cmd = self.parse_pipe()
        while self.peek("&"):
            self.gettoken()
            cmd = BackCmd(cmd)
        if self.peek(";"):
            self.gettoken()
            cmd = ListCmd(cmd, self.parse_line())
        return cmd

    def parse_pipe(self) -> Command:
        cmd = self.parse_exec()
        if self.peek("|"):
            self.gettoken()
            cmd = PipeCmd(cmd, self.parse_pipe())
        return cmd

    def parse_redirs(self, cmd: Command) -> Command:
        while self.peek("<>"):
            tok, _ = self.gettoken()
            kind, name = self.gettoken()
            if kind != WORD:
                raise ShellSyntaxError("missing file for redirection")
            if tok == "<":
                cmd = RedirCmd(cmd, name, OpenFlag.RDONLY, 0)
            elif tok == ">":
                cmd = RedirCmd(cmd, name, OpenFlag.WRONLY | OpenFlag.CREATE | OpenFlag.TRUNC, 1)
            else:
                cmd = RedirCmd(cmd, name, OpenFlag.WRONLY | OpenFlag.CREATE, 1)
        return cmd

    def parse_block(self) -> Command:
        if not self.peek("("):
            raise ShellSyntaxError("parseblock")
        self.gettoken()
        cmd = self.parse_line()
        if not self.peek(")"):
            raise ShellSyntaxError("syntax - missing )")
        self.gettoken()
        return self.parse_redirs(cmd)

    def parse_exec(self) -> Command:
        if self.peek("("):
            return self.parse_block()
        exec_cmd = ExecCmd()
        ret: Command = self.parse_redirs(exec_cmd)
        while not self.peek("|)&;"):
            kind, text = self.gettoken()
            if kind is None:
                break
            if kind != WORD:
                raise ShellSyntaxError("syntax")
            exec_cmd.argv.append(text)
            if len(exec_cmd.argv) >= MAXARGS:
                raise ShellSyntaxError("too many args")
            ret = self.parse_redirs(ret)
        return ret


def tokenize(s: str) -> List[Tuple[str, str]]:
    """Split s into (kind, text) tokens.

    kind is the symbol itself for | ( ) ; & < >, "+" for >>, and "a" for a word.
    """
    parser = _Parser(s)
    tokens = []
    while True:
        kind, text = parser.gettoken()
        if kind is None:
            return tokens
        tokens.append((kind, text))


def parse_command(s: str) -> Command:
    """Parse a whole command line into a command tree."""
    parser = _Parser(s)
    cmd = parser.parse_line()
    parser.peek("")
    if parser.pos != parser.end:
        raise ShellSyntaxError(f"leftovers: {s[parser.pos:]}")
    return cmd