"""Entry point for SSH-forced commands managing virtual machines."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from enum import IntEnum

from sshkvm.database import DatabaseError, init_database
from sshkvm.identification import AUTHORIZED_KEYS, IdentificationError, identify
from sshkvm.textutil import split

COMMAND_ENV = "SSH_ORIGINAL_COMMAND"


class Command(IntEnum):
    """Action requested by the SSH command line."""

    CREATE_VM = 0
    RESTART_VM = 1
    SNAPSHOT_VM = 2
    SHUTDOWN_VM = 3
    HELP = 4
    DISPATCH_ERR = 5


_KEYWORDS = {
    "vmc": Command.CREATE_VM,
    "vms": Command.SNAPSHOT_VM,
    "vmr": Command.RESTART_VM,
    "vm_off": Command.SHUTDOWN_VM,
    "help": Command.HELP,
}

_MESSAGES = {
    Command.DISPATCH_ERR: "Argument processing error",
    Command.CREATE_VM: "You are asking a vm creation",
    Command.RESTART_VM: "You are asking for a  restart vm",
    Command.SNAPSHOT_VM: "You are asking for a  snapshot vm",
    Command.SHUTDOWN_VM: "You are asking for a  shutdown  of vm",
}


def parse_command(arg: str) -> Command:
    """Turn the space-separated command line into a :class:`Command`.

    Every word from the third on marks the line as invalid, but a keyword
    appearing later still overrides that.
    """
    code = Command.DISPATCH_ERR
    for position, word in enumerate(split(arg, " ")):
        if position > 1:
            code = Command.DISPATCH_ERR
        code = _KEYWORDS.get(word, code)
    return code


def help_text() -> str:
    """The usage message."""
    return (
        "Usage:\n"
        "  -vmc   Create a virtual machine\n"
        "  -vmr   Reboot a virtual machine\n"
        "  -vms   Create a snapshot of a virtual machine\n"
        "  -vmsd  Shutdown a virtual machine\n"
        "  -help  Display this help message\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the dispatcher; the command comes from ``SSH_ORIGINAL_COMMAND``.

    *argv* is accepted for a uniform entry point and is not used.
    """
    try:
        init_database()
    except DatabaseError as exc:
        print(exc)
        return exc.code
    print("Connexion DB OK!")

    try:
        identity = identify(os.environ, AUTHORIZED_KEYS)
    except IdentificationError as exc:
        print(exc)
        print("Identification error")
        return 1
    print(f"User: {identity.user}")
    print(f"Machine: {identity.machine}")
    print(f"Key: {identity.pub_key}")

    arg = os.environ.get(COMMAND_ENV)
    if arg is None:
        print("You need to give an argument")
        print(help_text(), end="")
        return 1

    command = parse_command(arg)
    if command is Command.HELP:
        print(help_text(), end="")
    else:
        print(_MESSAGES[command])
    return 0


if __name__ == "__main__":
    sys.exit(main())