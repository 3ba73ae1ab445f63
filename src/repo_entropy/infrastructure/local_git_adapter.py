"""Local checkout adapter: implements the SnapshotProvider port via ``git``.

The snapshot is the tree of the ``HEAD`` commit.  Staged or untracked
changes in the working tree are not part of it, and binary detection reads
the committed blob rather than the file on disk.
"""

from __future__ import annotations

import asyncio
import logging
import subprocess
from pathlib import Path

from repo_entropy.domain.entities import BINARY_SNIFF_BYTES, FileRecord
from repo_entropy.domain.exceptions import SnapshotRetrievalError

logger = logging.getLogger(__name__)


class LocalGitAdapter:
    """Lists the blobs of ``HEAD`` with ``git ls-tree`` and sniffs them for binary content."""

    def __init__(self, git_executable: str = "git") -> None:
        self._git = git_executable

    async def fetch_snapshot(self, source: str) -> list[FileRecord]:
        return await asyncio.to_thread(self.list_files, Path(source))

    def list_files(self, root: Path) -> list[FileRecord]:
        root = root.resolve()
        if not root.is_dir():
            raise SnapshotRetrievalError(f"Failed to open git repo: {root} is not a directory")

        self._run(root, "rev-parse", "--git-dir", error=f"Failed to open git repo at {root}")
        self._run(
            root, "rev-parse", "--verify", "HEAD^{commit}", error="Failed to get HEAD"
        )

        blobs = self._ls_tree(root)
        binary_oids = self._binary_blobs(root, {oid for _, oid in blobs})
        records = [FileRecord(path=path, is_binary=oid in binary_oids) for path, oid in blobs]

        logger.debug("Listed %d files from HEAD of %s", len(records), root)
        return records

    def _ls_tree(self, root: Path) -> list[tuple[str, str]]:
        """Return ``(path, blob_oid)`` for every blob in the HEAD tree."""
        out = self._run(
            root,
            "ls-tree", "-r", "-z", "--full-tree", "HEAD",
            error="Failed to read HEAD tree",
        )
        blobs: list[tuple[str, str]] = []
        for entry in out.split(b"\0"):
            if not entry:
                continue
            meta, _, raw_path = entry.partition(b"\t")
            _mode, obj_type, oid = meta.decode("ascii").split()
            path = raw_path.decode("utf-8", errors="surrogateescape")
            if obj_type != "blob":
                # Submodule commits
                logger.debug("Skipping %s: %s entry", path, obj_type)
                continue
            blobs.append((path, oid))
        return blobs

    def _binary_blobs(self, root: Path, oids: set[str]) -> set[str]:
        """Return the subset of *oids* whose leading bytes contain a NUL."""
        if not oids:
            return set()
        ordered = sorted(oids)
        out = self._run(
            root,
            "cat-file", "--batch",
            input="\n".join(ordered).encode("ascii") + b"\n",
            error="Failed to read blobs",
        )

        binary: set[str] = set()
        pos = 0
        for _ in ordered:
            header_end = out.index(b"\n", pos)
            header = out[pos:header_end].decode("ascii").split()
            pos = header_end + 1
            if len(header) != 3:
                raise SnapshotRetrievalError(f"Failed to read blob {header[0]}: missing")
            oid, _type, size = header
            if b"\0" in out[pos:pos + min(int(size), BINARY_SNIFF_BYTES)]:
                binary.add(oid)
            pos += int(size) + 1
        return binary

    def _run(self, root: Path, *args: str, error: str, input: bytes | None = None) -> bytes:
        try:
            proc = subprocess.run(
                [self._git, *args],
                cwd=root,
                input=input,
                capture_output=True,
                check=False,
            )
        except OSError as exc:
            raise SnapshotRetrievalError(f"Could not run {self._git}: {exc}") from exc

        if proc.returncode != 0:
            stderr = proc.stderr.decode("utf-8", errors="replace").strip()
            raise SnapshotRetrievalError(f"{error}: {stderr}")
        return proc.stdout
