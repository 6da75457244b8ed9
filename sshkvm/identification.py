"""Identify the SSH user from the key used to authenticate."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from sshkvm.linereader import LineReader
from sshkvm.textutil import split

AUTHORIZED_KEYS = "/home/network/.ssh/authorized_keys"
AUTH_ENV = "SSH_USER_AUTH"


class IdentificationError(Exception):
    """The connecting user could not be identified."""


@dataclass(frozen=True)
class Identity:
    """Who is connected: user name, machine name and public key."""

    user: str
    machine: str
    pub_key: str


def parse_public_key(line: str) -> str:
    """Extract the key blob, the third word, from an ``SSH_USER_AUTH`` line."""
    words = split(line, " ")
    if len(words) < 3:
        raise IdentificationError(f"public key not found in line {line!r}")
    key = words[2].rstrip("\n")
    if not key:
        raise IdentificationError(f"empty public key in line {line!r}")
    return key


def read_public_key(path: str | Path) -> str:
    """Read the first line of the file at *path* and return its key blob."""
    try:
        with open(path, "rb") as stream:
            line = LineReader(stream).read_line()
    except OSError as exc:
        raise IdentificationError(f"open error: {exc}") from exc
    if line is None:
        raise IdentificationError(f"no line to read in {path}")
    return parse_public_key(line)


def find_user(pub_key: str, lines: Iterable[str]) -> Identity:
    """Find the authorized-keys line holding *pub_key* and read ``user@machine``.

    Lines whose key does not match, or that carry no comment, are skipped.
    """
    for line in lines:
        words = split(line, " ")
        if len(words) < 3 or words[1] != pub_key:
            continue
        comment = words[2].rstrip("\n")
        user, _, machine = comment.partition("@")
        return Identity(user=user, machine=machine, pub_key=pub_key)
    raise IdentificationError("public key not found in authorized keys")


def identify(
    environ: Mapping[str, str] | None = None,
    authorized_keys: str | Path = AUTHORIZED_KEYS,
) -> Identity:
    """Identify the user whose key file is named by ``SSH_USER_AUTH``."""
    env = os.environ if environ is None else environ
    key_path = env.get(AUTH_ENV)
    if not key_path:
        raise IdentificationError(f"environment variable {AUTH_ENV} is not set")
    pub_key = read_public_key(key_path)
    try:
        with open(authorized_keys, "rb") as stream:
            return find_user(pub_key, LineReader(stream))
    except OSError as exc:
        raise IdentificationError(f"open error: {exc}") from exc