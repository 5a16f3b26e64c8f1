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

"""Exception type raised by commitgroup.

Grouping itself never raises: malformed commit subjects degrade to the
``misc`` bucket. Only configuration parsing and the release-version
helpers report errors, always through :class:`CommitGroupError`.
"""

from __future__ import annotations

__all__ = [
    'CommitGroupError',
]


class CommitGroupError(Exception):
    """A configuration or release-version problem.

    Attributes:
        message: Human-readable description of what went wrong.
        hint: Optional suggestion on how to fix it.
    """

    def __init__(self, message: str, *, hint: str = '') -> None:
        """Create the error with a message and an optional hint."""
        super().__init__(message)
        self.message = message
        self.hint = hint

    def __str__(self) -> str:
        """Render the message, followed by the hint when present."""
        if self.hint:
            return f'{self.message} (hint: {self.hint})'
        return self.message
