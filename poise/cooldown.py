"""Cooldown tracking for command invocations."""

from __future__ import annotations

import time
from collections.abc import Callable, Hashable
from dataclasses import dataclass, field, fields
from datetime import timedelta

__all__ = ["CooldownConfig", "InvocationScope", "CooldownTracker"]

Duration = timedelta | float | int


def _as_timedelta(value: Duration | None) -> timedelta | None:
    if value is None or isinstance(value, timedelta):
        return value
    return timedelta(seconds=value)


@dataclass(frozen=True)
class CooldownConfig:
    """Cooldown durations per bucket; None means no cooldown in that bucket.

    Durations may be given as ``timedelta`` or as a number of seconds.
    """

    global_: timedelta | None = None
    user: timedelta | None = None
    guild: timedelta | None = None
    channel: timedelta | None = None
    member: timedelta | None = None

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, _as_timedelta(getattr(self, f.name)))


@dataclass(frozen=True)
class InvocationScope:
    """Who invoked a command and where; ``guild_id`` is None in direct messages."""

    user_id: Hashable
    channel_id: Hashable
    guild_id: Hashable | None = None


@dataclass
class CooldownTracker:
    """Tracks the last invocation times of one command in every cooldown bucket.

    ``clock`` returns the current time in seconds and must be monotonic.
    """

    config: CooldownConfig = field(default_factory=CooldownConfig)
    clock: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)
    global_invocation: float | None = None
    user_invocations: dict[Hashable, float] = field(default_factory=dict)
    guild_invocations: dict[Hashable, float] = field(default_factory=dict)
    channel_invocations: dict[Hashable, float] = field(default_factory=dict)
    member_invocations: dict[tuple[Hashable, Hashable], float] = field(
        default_factory=dict
    )

    def remaining_cooldown(
        self,
        scope: InvocationScope,
        cooldown_durations: CooldownConfig | None = None,
    ) -> timedelta | None:
        """Return the longest cooldown still running, or None if the command may run.

        Uses the tracker's own configuration when ``cooldown_durations`` is None.
        """
        durations = cooldown_durations if cooldown_durations is not None else self.config
        buckets = [
            (durations.global_, self.global_invocation),
            (durations.user, self.user_invocations.get(scope.user_id)),
            (durations.channel, self.channel_invocations.get(scope.channel_id)),
        ]
        if scope.guild_id is not None:
            buckets.append(
                (durations.guild, self.guild_invocations.get(scope.guild_id))
            )
            buckets.append(
                (
                    durations.member,
                    self.member_invocations.get((scope.user_id, scope.guild_id)),
                )
            )

        now = self.clock()
        remaining = [
            cooldown - elapsed
            for cooldown, last in buckets
            if cooldown is not None and last is not None
            for elapsed in [timedelta(seconds=max(0.0, now - last))]
            if cooldown >= elapsed
        ]
        return max(remaining, default=None)

    def start_cooldown(self, scope: InvocationScope) -> None:
        """Record an invocation so that all associated cooldowns start running."""
        now = self.clock()
        self.global_invocation = now
        self.user_invocations[scope.user_id] = now
        self.channel_invocations[scope.channel_id] = now
        if scope.guild_id is not None:
            self.guild_invocations[scope.guild_id] = now
            self.member_invocations[(scope.user_id, scope.guild_id)] = now