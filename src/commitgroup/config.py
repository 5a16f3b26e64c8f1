# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""Grouping configuration: changelog groups and ignored scopes.

A group is declared as an alias list, first the display label, then the
commit types collected under it::

    groups = [
        ['## Features', 'feat', 'feature'],
        ['## Bug Fixes', 'fix'],
    ]
    ignored_scopes = ['internal', 'deps']

The first type (lower-cased) is the bucket key. Group order is the
display order and the tie-break when two groups share a type: the
earlier group wins.

Configuration is read from TOML. In ``pyproject.toml`` it lives under
``[tool.commitgroup]``; any other file (e.g. ``commitgroup.toml``)
holds the keys at top level.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from commitgroup.errors import CommitGroupError
from commitgroup.logging import get_logger

__all__ = [
    'DEFAULT_GROUPS',
    'RESERVED_KEYS',
    'GroupConfig',
    'GroupDef',
    'load_config',
    'parse_group_config',
]

logger = get_logger(__name__)

# Bucket keys owned by the grouper itself.
RESERVED_KEYS: frozenset[str] = frozenset({'release', 'breaking'})

_ALLOWED_KEYS: frozenset[str] = frozenset({'groups', 'ignored_scopes', 'ignoredScopes'})

_PYPROJECT = 'pyproject.toml'


@dataclass(frozen=True)
class GroupDef:
    """One changelog group.

    Attributes:
        label: Display heading, consumed by the changelog renderer.
        types: Commit types collected under this group. The first one
            names the bucket key.
    """

    label: str
    types: tuple[str, ...]

    def __post_init__(self) -> None:
        """Reject groups that cannot own a bucket key."""
        if not self.types:
            raise CommitGroupError(
                f'group {self.label!r} needs at least one commit type',
                hint="Declare groups as ['## Label', 'type', ...].",
            )
        if self.key in RESERVED_KEYS:
            raise CommitGroupError(
                f'group {self.label!r} uses reserved key {self.key!r}',
                hint=f'Reserved keys: {", ".join(sorted(RESERVED_KEYS))}.',
            )

    @property
    def key(self) -> str:
        """The bucket key, the first type lower-cased."""
        return self.types[0].lower()

    @property
    def match_types(self) -> frozenset[str]:
        """Commit types matched by this group (case-sensitive)."""
        return frozenset(self.types)

    @classmethod
    def from_aliases(cls, aliases: Iterable[str]) -> GroupDef:
        """Build a group from a ``[label, type, ...]`` alias list."""
        label, *types = aliases
        return cls(label=label, types=tuple(types))


DEFAULT_GROUPS: tuple[GroupDef, ...] = (
    GroupDef(label='## Features', types=('feat', 'feature')),
    GroupDef(label='## Bug Fixes', types=('fix',)),
)


@dataclass(frozen=True)
class GroupConfig:
    """Configuration consumed by :func:`commitgroup.grouping.group_commits`.

    Attributes:
        groups: Ordered group definitions. May be empty, in which case
            every commit lands in ``misc``.
        ignored_scopes: Scopes whose commits are dropped entirely.
    """

    groups: tuple[GroupDef, ...] = DEFAULT_GROUPS
    ignored_scopes: frozenset[str] = field(default_factory=frozenset)

    def match(self, commit_type: str) -> GroupDef | None:
        """Return the first group whose types contain ``commit_type``."""
        for group in self.groups:
            if commit_type in group.match_types:
                return group
        return None


def _parse_group(index: int, raw: Any) -> GroupDef:  # noqa: ANN401
    """Validate one ``groups`` entry."""
    where = f'groups[{index}]'
    if not isinstance(raw, (list, tuple)):
        raise CommitGroupError(
            f'{where} must be a list of strings, got {type(raw).__name__}',
            hint="Declare groups as ['## Label', 'type', ...].",
        )
    if len(raw) < 2:
        raise CommitGroupError(
            f'{where} needs a label and at least one commit type',
            hint="Declare groups as ['## Label', 'type', ...].",
        )
    for pos, item in enumerate(raw):
        if not isinstance(item, str) or not item:
            raise CommitGroupError(f'{where}[{pos}] must be a non-empty string')
    return GroupDef.from_aliases(raw)


def _parse_scopes(raw: Any) -> frozenset[str]:  # noqa: ANN401
    """Validate the ``ignored_scopes`` list."""
    if not isinstance(raw, (list, tuple, set, frozenset)):
        raise CommitGroupError(f'ignored_scopes must be a list, got {type(raw).__name__}')
    for pos, item in enumerate(raw):
        if not isinstance(item, str):
            raise CommitGroupError(f'ignored_scopes[{pos}] must be a string')
    return frozenset(raw)


def parse_group_config(data: Mapping[str, Any]) -> GroupConfig:
    """Build a :class:`GroupConfig` from a plain mapping.

    Missing keys keep their defaults. ``ignoredScopes`` is accepted as
    a spelling of ``ignored_scopes``.

    Args:
        data: Mapping with optional ``groups`` and ``ignored_scopes``.

    Returns:
        The validated configuration.

    Raises:
        CommitGroupError: On unknown keys or malformed values.
    """
    if not isinstance(data, Mapping):
        raise CommitGroupError(f'commitgroup config must be a table, got {type(data).__name__}')

    unknown = sorted(set(data) - _ALLOWED_KEYS)
    if unknown:
        raise CommitGroupError(
            f'Unknown key(s) in commitgroup config: {", ".join(unknown)}',
            hint='Valid keys: groups, ignored_scopes.',
        )

    groups = DEFAULT_GROUPS
    if 'groups' in data:
        raw_groups = data['groups']
        if not isinstance(raw_groups, (list, tuple)):
            raise CommitGroupError(f'groups must be a list, got {type(raw_groups).__name__}')
        groups = tuple(_parse_group(i, g) for i, g in enumerate(raw_groups))

    scopes: frozenset[str] = frozenset()
    raw_scopes = data.get('ignored_scopes', data.get('ignoredScopes'))
    if raw_scopes is not None:
        scopes = _parse_scopes(raw_scopes)

    return GroupConfig(groups=groups, ignored_scopes=scopes)


def load_config(path: Path) -> GroupConfig:
    """Load grouping configuration from a TOML file.

    Args:
        path: ``pyproject.toml`` (reads ``[tool.commitgroup]``) or a
            dedicated TOML file (reads the top level).

    Returns:
        The validated configuration, or the defaults when ``path``
        does not exist or has no commitgroup table.

    Raises:
        CommitGroupError: If the file cannot be read or parsed, or the
            configuration is invalid.
    """
    if not path.is_file():
        logger.debug('config_not_found', path=str(path))
        return GroupConfig()

    try:
        with path.open('rb') as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning('config_parse_error', path=str(path), error=str(exc))
        raise CommitGroupError(
            f'Cannot read commitgroup config {path}: {exc}',
            hint='Check that the file is valid TOML.',
        ) from exc

    if path.name == _PYPROJECT:
        tool = data.get('tool', {})
        if not isinstance(tool, Mapping):
            raise CommitGroupError(f'[tool] in {path} must be a table')
        data = tool.get('commitgroup', {})
        if not isinstance(data, Mapping):
            raise CommitGroupError(f'[tool.commitgroup] in {path} must be a table')

    config = parse_group_config(data)
    logger.debug(
        'config_loaded',
        path=str(path),
        groups=[g.key for g in config.groups],
        ignored_scopes=sorted(config.ignored_scopes),
    )
    return config
