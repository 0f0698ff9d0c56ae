# xvtools

Small user-level tools in the style of a minimal Unix-like teaching
system. The package also has Python models of the constants and binary
layouts those tools rely on. Everything is pure Python with no
third-party dependencies.

## Command-line tools

Each tool is installed as a console script:

| Command      | What it does                                                             |
|--------------|--------------------------------------------------------------------------|
| `xv-grep`    | Prints the lines that match a tiny regex language (`^`, `.`, `*`, `$`).  |
| `xv-wc`      | Prints line, word and byte counts, then the file name.                   |
| `xv-cat`     | Copies files, or standard input, to standard output.                     |
| `xv-echo`    | Prints its arguments separated by spaces.                                |
| `xv-ls`      | Lists files with their type (1 dir, 2 file, 3 device), inode and size.   |
| `xv-find`    | Prints the paths under a directory of non-directories with a given name. |
| `xv-mkdir`   | Creates directories, stopping at the first failure.                      |
| `xv-rm`      | Removes files or empty directories, stopping at the first failure.       |
| `xv-ln`      | Creates a hard link.                                                     |
| `xv-primes`  | Prints the primes from 2 to 280, one `prime N` line each.                |

Examples:

```
xv-grep '^ab*c$' notes.txt
xv-wc README.md
xv-echo hello world
xv-find . README.md
xv-ln old new
xv-primes
```

Some behaviour worth knowing:

- `xv-grep` and `xv-wc` read standard input when given no files. If a
  file cannot be opened they print `grep: cannot open NAME` or
  `wc: cannot open NAME` on standard output and exit with status 1.
  `xv-grep` never reports a last line that lacks a newline.
- `xv-grep`, `xv-mkdir`, `xv-rm` and `xv-ln` print a usage message on
  standard error and exit with status 1 when given too few arguments.
- `xv-find` needs exactly a directory and a name. Otherwise it prints an
  error on standard error but still exits with status 0.
- `xv-ls` lists `.` when given no arguments. A directory listing includes
  `.` and `..` followed by the entries in sorted order.
- `xv-ln` reports a failed link on standard error and still exits with 0.

## Library

Each module can also be used on its own:

- `xvtools.params` holds system limits (`MAXARG`, `MAXPATH`, `NPROC`, and
  more), the `FileType` and `OpenFlag` enums, and the `Stat` record. It
  also has page and page-table helpers: `pg_round_up`, `pg_round_down`,
  `pa2pte`, `pte2pa`, `pte_flags` and `px`. The memory-layout helpers are
  `kstack`, `make_satp`, `plic_senable`, `plic_spriority` and
  `plic_sclaim`.
- `xvtools.elf` has `ElfHeader` and `ProgramHeader`, each with
  `from_bytes` and `to_bytes` in little-endian layout.
  `ElfHeader.is_valid` checks the magic number. Short or unpackable data
  raises `ElfError`.
- `xvtools.virtio` defines the virtio MMIO register offsets and the
  block-device structures `VirtqDesc`, `VirtqAvail`, `VirtqUsedElem`,
  `VirtqUsed` and `BlkRequest`. All of them except `VirtqUsedElem` have
  `from_bytes` and `to_bytes`.
- `xvtools.ulib` has `atoi`, `strcmp`, `memcmp` and `gets`, which behave
  like their small C-library counterparts.
- `xvtools.fmt` is a minimal formatter that understands `%d`, `%u`, `%x`,
  `%p`, `%s`, their `l`/`ll` forms and `%%`. It provides
  `format_string`, `fprintf` and `printf`. Integers are taken as 32-bit
  values and hex digits are upper case.
- `xvtools.grep` provides `match` and the generator `grep`.
- `xvtools.wc` provides `count`, which returns a `Counts(lines, words,
  chars)`.
- `xvtools.cat` provides `cat(src, dst)` for binary streams.
- `xvtools.echo` provides `echo(args)`, which returns the output text.
- `xvtools.fsutils` provides `fmtname`, and `ls` and `find` as generators
  of output lines.
- `xvtools.umalloc` is a first-fit, address-ordered, coalescing free-list
  `Allocator` over a simulated heap. It has `malloc`, `free` and
  `free_blocks`. Running out of heap raises `MemoryError`.
- `xvtools.shell` has `tokenize`, and `parse_command`, which builds
  `ExecCmd`, `RedirCmd`, `PipeCmd`, `ListCmd` and `BackCmd` trees. Bad
  input raises `ShellSyntaxError`.
- `xvtools.primes` has `primes(limit)`, a generator of primes.
- `xvtools.rand` is the Park–Miller "minimal standard" generator. It
  provides `do_rand` and `ParkMiller`.
- `xvtools.xargs` has `build_argvs`, which turns input lines into
  argument lists. An over-long line raises `LineTooLong`.

```python
from xvtools.grep import match
from xvtools.fmt import format_string
from xvtools.shell import parse_command

match("^ab*c$", "abbbc")                      # True
format_string("%d %x %s", -5, 255, "hi")      # "-5 FF hi"
tree = parse_command("cat < in | wc > out")   # a PipeCmd tree
```

## What it does not do

- `xvtools.shell` parses command lines but does not run them. There is no
  interactive shell.
- `xvtools.xargs` only builds argument lists and does not start any
  commands. There is no `xargs` command.
- The ELF, virtio and page-table modules describe layouts and values
  only. Nothing here loads programs, drives devices or manages real
  memory.