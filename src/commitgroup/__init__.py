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

"""Group conventional-commit history into changelog release buckets.

Usage::

    from commitgroup import GroupConfig, group_commits

    lines = git_log_lines()  # ['<hash> <subject>', ...], newest first
    for bucket in group_commits(lines, GroupConfig(ignored_scopes=frozenset({'deps'}))):
        render(bucket)
"""

from commitgroup.config import DEFAULT_GROUPS, GroupConfig, GroupDef, load_config, parse_group_config
from commitgroup.errors import CommitGroupError
from commitgroup.grouping import (
    BREAKING_KEY,
    MISC_KEY,
    RELEASE_KEY,
    ReleaseBucket,
    group_commits,
    group_commits_async,
)

__version__ = '0.1.0'

__all__ = [
    'BREAKING_KEY',
    'DEFAULT_GROUPS',
    'MISC_KEY',
    'RELEASE_KEY',
    'CommitGroupError',
    'GroupConfig',
    'GroupDef',
    'ReleaseBucket',
    'group_commits',
    'group_commits_async',
    'load_config',
    'parse_group_config',
]
