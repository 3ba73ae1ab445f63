"""Command-line entry point.

Usage:
    repo-entropy [--path PATH | --github-url URL] [--last 7d] [--limit N]
                 [--relative] [--json] [--verbose]
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Sequence

import httpx

from repo_entropy.domain.entities import DirectoryEntropyAnalysis, ThresholdMode
from repo_entropy.domain.exceptions import RepoEntropyError
from repo_entropy.infrastructure.config import Settings, get_settings
from repo_entropy.infrastructure.github_rest_adapter import GitHubRestAdapter
from repo_entropy.infrastructure.local_git_adapter import LocalGitAdapter
from repo_entropy.interface.schemas import DirectoryEntropyResponse
from repo_entropy.main import configure_logging
from repo_entropy.services.analyze_entropy import (
    DIRECTORY_ENTROPY_CONTEXT,
    AnalyzeDirectoryEntropyUseCase,
)
from repo_entropy.services.report_renderer import render


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repo-entropy",
        description=(
            "Analyze entropy across repository directories to identify areas with "
            "weak modularity and eroded boundaries."
        ),
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--path", help="Local git checkout to analyze (default: current directory)")
    source.add_argument("--github-url", help="Public GitHub repository to analyze instead")
    parser.add_argument("--last", help="Limit analysis to a timeframe (e.g. 7d, 2m, 1y)")
    parser.add_argument(
        "--limit",
        type=int,
        default=settings.result_limit,
        help=f"Number of top results to show (default {settings.result_limit})",
    )
    parser.add_argument(
        "--relative",
        action="store_true",
        help="Scale thresholds by the repository's average entropy",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON instead of tables")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    return parser


async def _run(args: argparse.Namespace, settings: Settings) -> DirectoryEntropyAnalysis:
    mode = ThresholdMode.RELATIVE if args.relative else settings.threshold_mode

    if not args.github_url:
        use_case = AnalyzeDirectoryEntropyUseCase(LocalGitAdapter(), threshold_mode=mode)
        return await use_case.execute(args.path or ".", last=args.last, limit=args.limit)

    token = settings.github_token.get_secret_value() if settings.github_token else None
    async with httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout)) as client:
        adapter = GitHubRestAdapter(client=client, token=token)
        use_case = AnalyzeDirectoryEntropyUseCase(adapter, threshold_mode=mode)
        return await use_case.execute(args.github_url, last=args.last, limit=args.limit)


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)
    configure_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        analysis = asyncio.run(_run(args, settings))
    except RepoEntropyError as exc:
        print(f"Failed to analyze directory entropy: {exc}", file=sys.stderr)
        return 1

    if args.json:
        response = DirectoryEntropyResponse.from_analysis(analysis, DIRECTORY_ENTROPY_CONTEXT)
        print(response.model_dump_json(indent=2))
    else:
        print(render(analysis))
    return 0


if __name__ == "__main__":
    sys.exit(main())
