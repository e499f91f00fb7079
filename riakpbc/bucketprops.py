"""Bucket properties, commit hooks and Erlang module/function references."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import IntEnum
from typing import Iterable, List, Optional

from .printing import PrintState

UINT32_MAX = 0xFFFFFFFF

# Quorum values travel as magic numbers counted down from UINT32_MAX.
_QUORUM_NAMES = ("unknown", "one", "quorum", "all", "default")
_MAX_QUORUM = 4

_UINT32_FIELDS = (
    "n_val",
    "old_vclock",
    "young_vclock",
    "big_vclock",
    "small_vclock",
    "pr",
    "r",
    "w",
    "pw",
    "dw",
    "rw",
)
_BYTES_FIELDS = ("backend", "search_index")


class ReplMode(IntEnum):
    """Replication mode of a bucket."""

    FALSE = 0
    REALTIME = 1
    FULLSYNC = 2
    TRUE = 3

    @property
    def label(self) -> str:
        return _REPL_LABELS[self]


_REPL_LABELS = {
    ReplMode.FALSE: "False",
    ReplMode.REALTIME: "Real time",
    ReplMode.FULLSYNC: "Full-Sync",
    ReplMode.TRUE: "True",
}


def quorum_name(value: int) -> str:
    """Name the magic quorum encoding ``value``; anything else is ``"unknown"``."""
    offset = UINT32_MAX - int(value)
    if offset < 0 or offset >= _MAX_QUORUM:
        offset = 0
    return _QUORUM_NAMES[offset]


@dataclass(frozen=True)
class ModFun:
    """A reference to an Erlang function by module and function name."""

    module: bytes
    function: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "module", bytes(self.module))
        object.__setattr__(self, "function", bytes(self.function))

    def describe(self, state: PrintState, name: str) -> int:
        """Write the module and function under ``name``; return characters written."""
        wrote = state.write(f"{name}: ")
        wrote += state.label_binary("Module", self.module)
        wrote += state.label_binary("Function", self.function)
        return wrote


@dataclass(frozen=True)
class CommitHook:
    """A pre- or post-commit hook, given by name, by module/function, or both."""

    name: Optional[bytes] = None
    modfun: Optional[ModFun] = None

    def __post_init__(self) -> None:
        if self.name is not None:
            object.__setattr__(self, "name", bytes(self.name))

    @property
    def has_name(self) -> bool:
        return self.name is not None


def describe_commit_hooks(state: PrintState, hooks: Iterable[CommitHook]) -> int:
    """Write each hook in turn; return characters written."""
    wrote = 0
    for index, hook in enumerate(hooks):
        wrote += state.write(f"Hook {index}\n")
        if hook.has_name:
            wrote += state.label_binary("Name", hook.name)
        if hook.modfun is not None:
            wrote += hook.modfun.describe(state, "Mod Fun")
    return wrote


@dataclass
class BucketProps:
    """Properties of a bucket; ``None`` marks a property that is not set.

    ``has_precommit``/``has_postcommit`` are ``None`` when unset, otherwise
    whether the hook lists apply.
    """

    n_val: Optional[int] = None
    allow_mult: Optional[bool] = None
    last_write_wins: Optional[bool] = None
    has_precommit: Optional[bool] = None
    precommit: List[CommitHook] = field(default_factory=list)
    has_postcommit: Optional[bool] = None
    postcommit: List[CommitHook] = field(default_factory=list)
    chash_keyfun: Optional[ModFun] = None
    linkfun: Optional[ModFun] = None
    old_vclock: Optional[int] = None
    young_vclock: Optional[int] = None
    big_vclock: Optional[int] = None
    small_vclock: Optional[int] = None
    pr: Optional[int] = None
    r: Optional[int] = None
    w: Optional[int] = None
    pw: Optional[int] = None
    dw: Optional[int] = None
    rw: Optional[int] = None
    basic_quorum: Optional[bool] = None
    notfound_ok: Optional[bool] = None
    backend: Optional[bytes] = None
    search: Optional[bool] = None
    repl: Optional[ReplMode] = None
    search_index: Optional[bytes] = None

    def __post_init__(self) -> None:
        for name in _UINT32_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            value = int(value)
            if not 0 <= value <= UINT32_MAX:
                raise ValueError(f"{name} must fit in 32 unsigned bits, got {value}")
            setattr(self, name, value)
        for name in _BYTES_FIELDS:
            value = getattr(self, name)
            if value is not None:
                setattr(self, name, bytes(value))
        if self.repl is not None:
            self.repl = ReplMode(self.repl)
        self.precommit = list(self.precommit)
        self.postcommit = list(self.postcommit)

    def is_empty(self) -> bool:
        """True when no property is set."""
        return all(
            getattr(self, f.name) in (None, [])
            for f in fields(self)
        )

    def describe(self, state: PrintState) -> int:
        """Write the properties that are set; return characters written."""
        wrote = 0
        if self.n_val is not None:
            wrote += state.label_int("N", self.n_val)
        if self.allow_mult is not None:
            wrote += state.label_bool("Allow Multiple", self.allow_mult)
        if self.last_write_wins is not None:
            wrote += state.label_bool("LWW", self.last_write_wins)
        if self.has_precommit:
            wrote += state.label_int("# Precommit Hooks", len(self.precommit))
            wrote += describe_commit_hooks(state, self.precommit)
        if self.has_postcommit:
            wrote += state.label_int("# Postcommit Hooks", len(self.postcommit))
            wrote += describe_commit_hooks(state, self.postcommit)
        for label, value in (
            ("Old Vclock", self.old_vclock),
            ("Young Vclock", self.young_vclock),
            ("Big Vclock", self.big_vclock),
            ("Small Vclock", self.small_vclock),
        ):
            if value is not None:
                wrote += state.label_int(label, value)
        for label, value in (
            ("PR", self.pr),
            ("R", self.r),
            ("W", self.w),
            ("PW", self.pw),
            ("DW", self.dw),
            ("RW", self.rw),
        ):
            if value is not None:
                wrote += state.label_string(label, quorum_name(value))
        if self.basic_quorum is not None:
            wrote += state.label_bool("Basic Quorum", self.basic_quorum)
        if self.notfound_ok is not None:
            wrote += state.label_bool("Not Found OK", self.notfound_ok)
        if self.backend is not None:
            wrote += state.label_binary("Backend", self.backend)
        if self.search is not None:
            wrote += state.label_bool("Search", self.search)
        # The replication mode is always shown; unset reads as False.
        repl = self.repl if self.repl is not None else ReplMode.FALSE
        wrote += state.label_string("Repl", repl.label)
        if self.search_index is not None:
            wrote += state.label_binary("YZ Index", self.search_index)
        if self.chash_keyfun is not None:
            wrote += self.chash_keyfun.describe(state, "C Hash Key Fun")
        if self.linkfun is not None:
            wrote += self.linkfun.describe(state, "Link Fun")
        return wrote