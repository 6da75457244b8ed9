# sshkvm

`sshkvm` is meant to run as the forced command of an SSH account. On every
connection the `sshkvm` command:

1. makes sure the SQLite database `db/vm.db` (relative to the current
   directory) exists, with its `vm_state` table, and prints `Connexion DB OK!`;
2. identifies the caller: it reads the first line of the file named by the
   `SSH_USER_AUTH` environment variable, takes the key blob (its third word),
   and looks for the entry with that key in
   `/home/network/.ssh/authorized_keys`; the entry's comment, of the form
   `user@machine`, gives the user and machine names, which are printed along
   with the key;
3. reads the requested command from `SSH_ORIGINAL_COMMAND` and prints which
   virtual machine action was asked for.

## Installation

```
pip install .
```

## Use

Point the `command=` option of an `authorized_keys` entry, or the
`ForceCommand` setting of the SSH server, at the `sshkvm` script, and enable
`ExposeAuthInfo` so that `SSH_USER_AUTH` is set. A client then runs, for
example:

```
ssh network@host vmc
```

Recognised words in the command:

| word     | reported action                      |
|----------|--------------------------------------|
| `vmc`    | create a virtual machine             |
| `vmr`    | restart a virtual machine            |
| `vms`    | take a snapshot of a virtual machine |
| `vm_off` | shut a virtual machine down          |
| `help`   | print the usage text                 |

The command is split on spaces. A line with no recognised word is reported as
an argument processing error; a third or later word also marks the line as
invalid, unless a recognised word follows it.

Exit status: 0 once a command has been read and reported; 1 when
identification fails or `SSH_ORIGINAL_COMMAND` is not set (the usage text is
printed in that case); the error code carried by `DatabaseError` when the
database cannot be prepared.

## What it does not do

The actions are only reported, never carried out: no virtual machine is
created, restarted, snapshotted or shut down, and nothing is written to the
`vm_state` table beyond creating it.

## Library use

```python
from sshkvm.dispatcher import Command, parse_command, help_text
from sshkvm.identification import parse_public_key, find_user

parse_command("vmc")     # Command.CREATE_VM
parse_command("help")    # Command.HELP

key = parse_public_key("restrict ssh-ed25519 placeholder\n")   # "placeholder"
identity = find_user(key, ["ssh-ed25519 placeholder alice@laptop\n"])
identity.user, identity.machine    # ("alice", "laptop")
```

- `sshkvm.identification` also offers `read_public_key(path)` and
  `identify(environ, authorized_keys)`, which return an `Identity`
  (`user`, `machine`, `pub_key`) or raise `IdentificationError`.
- `sshkvm.database.init_database(path)` creates the database folder and the
  `vm_state` table if missing, raising `DatabaseError` (with a `code`) on
  failure.
- `sshkvm.linereader.LineReader` reads lines, newline included, from a file
  descriptor or a binary stream; `read_line()` returns `None` at the end, and
  the reader is iterable.
- `sshkvm.textutil`, `sshkvm.chars`, `sshkvm.memory`, `sshkvm.output` and
  `sshkvm.linkedlist` hold small text, character, byte-buffer,
  file-descriptor output and singly linked list helpers.

## Tests

```
pip install ".[test]"
pytest
```