"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

# "skipped" is the degraded path: warn and keep the file change.
# "failed" is a local git timeout: surfaced as a hard error.
GitStatus: TypeAlias = Literal["committed", "unchanged", "skipped", "failed"]
RefreshStatus: TypeAlias = Literal["cloned", "refreshed", "stale", "local"]
CommitKind: TypeAlias = Literal["feat", "fix", "refactor", "chore"]
