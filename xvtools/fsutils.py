"""Directory listing, file search and small file-management commands."""

from __future__ import annotations

import os
import stat as statmod
import sys
from typing import Iterator

from .fmt import format_string
from .params import FileType

DIRSIZ = 14
_BUFSZ = 512


def _file_type(mode: int) -> FileType:
    if statmod.S_ISDIR(mode):
        return FileType.DIR
    if statmod.S_ISREG(mode):
        return FileType.FILE
    return FileType.DEVICE


def fmtname(path: str) -> str:
    """Last path component, blank-padded to DIRSIZ unless already that long."""
    name = path[path.rfind("/") + 1:]
    if len(name) >= DIRSIZ:
        return name
    return name.ljust(DIRSIZ)


def _line(path: str, st: os.stat_result) -> str:
    return format_string("%s %d %d %d", fmtname(path), _file_type(st.st_mode), st.st_ino, st.st_size)


def ls(path: str) -> Iterator[str]:
    """Yield one output line per file: name, type, inode number and size.

    Raises OSError if path cannot be examined, and ValueError if a
    directory path is too long to extend with entry names.
    """
    st = os.stat(path)
    if _file_type(st.st_mode) is not FileType.DIR:
        yield _line(path, st)
        return
    if len(path) + 1 + DIRSIZ + 1 > _BUFSZ:
        raise ValueError("ls: path too long")
    for name in [".", ".."] + sorted(os.listdir(path)):
        entry = f"{path}/{name}"
        try:
            entry_st = os.stat(entry)
        except OSError:
            yield f"ls: cannot stat {entry}"
            continue
        yield _line(entry, entry_st)


def find(path: str, filename: str) -> Iterator[str]:
    """Yield paths under path of non-directories named filename.

    Directories that cannot be read are reported on standard error and skipped.
    """
    try:
        names = sorted(os.listdir(path))
    except OSError:
        sys.stderr.write(f"find: cannot open {path}\n")
        return
    for name in names:
        entry = f"{path}/{name}"
        try:
            st = os.lstat(entry)
        except OSError:
            sys.stdout.write(f"find: cannot stat {entry}\n")
            continue
        if _file_type(st.st_mode) is FileType.DIR:
            yield from find(entry, filename)
        elif name == filename:
            yield entry


def _args(argv: list[str] | None) -> list[str]:
    return sys.argv[1:] if argv is None else argv


def main_ls(argv: list[str] | None = None) -> int:
    for path in _args(argv) or ["."]:
        try:
            for line in ls(path):
                sys.stdout.write(line + "\n")
        except ValueError as exc:
            sys.stdout.write(f"{exc}\n")
        except OSError:
            sys.stderr.write(f"ls: cannot open {path}\n")
    return 0


def main_find(argv: list[str] | None = None) -> int:
    args = _args(argv)
    if len(args) != 2:
        sys.stderr.write("Error: Please specify directory and file names.\n")
        return 0
    for found in find(args[0], args[1]):
        sys.stdout.write(found + "\n")
    return 0


def main_mkdir(argv: list[str] | None = None) -> int:
    args = _args(argv)
    if not args:
        sys.stderr.write("Usage: mkdir files...\n")
        return 1
    for path in args:
        try:
            os.mkdir(path)
        except OSError:
            sys.stderr.write(f"mkdir: {path} failed to create\n")
            break
    return 0


def main_rm(argv: list[str] | None = None) -> int:
    args = _args(argv)
    if not args:
        sys.stderr.write("Usage: rm files...\n")
        return 1
    for path in args:
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                os.rmdir(path)
            else:
                os.unlink(path)
        except OSError:
            sys.stderr.write(f"rm: {path} failed to delete\n")
            break
    return 0


def main_ln(argv: list[str] | None = None) -> int:
    args = _args(argv)
    if len(args) != 2:
        sys.stderr.write("Usage: ln old new\n")
        return 1
    old, new = args
    try:
        os.link(old, new)
    except OSError:
        sys.stderr.write(f"link {old} {new}: failed\n")
    return 0