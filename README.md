# cryptbench

cryptbench times a small file-processing job run N times, first one
after another and then all at once on threads, and reports how much
faster the threaded run was.

Each job, for copy number `i`, works inside a working directory that
holds an `original.txt`:

1. copies `original.txt` to `i.txt`;
2. encrypts `i.txt` into `i.sha` (Caesar shift of 3 for ASCII letters,
   digits mirrored so that `0` and `9` swap, everything else unchanged);
3. hashes `i.txt` with SHA-256 twice and compares the two hashes;
4. decrypts `i.sha` into `i.des`;
5. compares `i.des` line by line with `original.txt`.

## Installing

    pip install .

## Running

Create the directories `file_workspace_sequential/` and
`file_workspace_parallel/` under the current directory and put an
`original.txt` in each, then run:

    cryptbench

or give the number of copies directly:

    cryptbench 10

Options:

- `copies` (optional): number of copies, 1 to 50. When it is omitted the
  program asks for it on standard input and asks again until it gets a
  number in range; if the input ends first it exits with status 1.
- `--sequential-dir DIR`: working directory for the sequential run
  (default `file_workspace_sequential/`).
- `--parallel-dir DIR`: working directory for the threaded run
  (default `file_workspace_parallel/`).

For each run the program prints the start time, the time of each job,
the end time, the total and the average job time. In the threaded run
the job times are listed in the order the jobs finished, each measured
from the previous finish. Finally it prints the improvement of the
threaded run as a percentage of the sequential time. The messages are
in Spanish.

Times are shown as `HH:MM:SS:mmm`. They are taken from the local time of
day, so a run that crosses midnight is wrapped by one day.

If a file cannot be read or written (for example a missing
`original.txt`), the program prints an error to standard error and
exits with status 1.

## What it does not do

The working directories are not created for you, and no `original.txt`
is generated: both must be in place before a run.

## Using it as a library

    from cryptbench.cipher import encrypt_line, decrypt_line
    from cryptbench.sha256 import Sha256, sha256_hex

    encrypt_line("Hola 123")           # 'Krod 876'
    decrypt_line(encrypt_line("abc"))  # 'abc'
    sha256_hex(b"abc")

`cryptbench.cipher` also has the single-character functions
`encrypt_letter`, `encrypt_digit`, `encrypt_char`, `decrypt_letter`,
`decrypt_digit` and `decrypt_char`, which raise `ValueError` when not
given exactly one character.

`Sha256` takes data when it is built, takes more through `update()`
(which returns the hasher), and gives the result through `digest()` or
`hexdigest()`. Strings are hashed as their UTF-8 bytes.

`cryptbench.files` has `copy_file`, `encrypt_file`, `decrypt_file`,
`files_equal`, `read_file`, `hash_file` and `strings_equal`.
`hash_file` returns an empty string for an empty file; `files_equal`
returns `False` when either file cannot be opened.

`cryptbench.process.run_process(workdir, index)` runs one job and returns
two booleans: whether the two hashes matched and whether the decrypted
file equals the original.

`cryptbench.runner.run_sequential` and `cryptbench.runner.run_parallel`
run a whole benchmark, write the report to a given text stream (standard
output by default) and return its `cryptbench.timer.Timer`.
`cryptbench.cli.improvement_percent` computes the final percentage.

## Tests

    pip install .[test]
    pytest