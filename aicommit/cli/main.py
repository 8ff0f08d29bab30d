"""CLI Main Entry Point

Start -> DiffCollected -> MessageGenerated -> Committed | Declined,
with an early exit to Failed after any stage.
"""

import sys
from typing import Callable

from aicommit.cli.args import parse_args
from aicommit.cli.confirm import confirm
from aicommit.config import Settings, load_settings, require_api_key
from aicommit.errors import AICommitError
from aicommit.git import CommitExecutor, DiffCollector
from aicommit.llm import ClaudeClient, LLMClient, MessageGenerator
from aicommit.output import bold, dim, info, print_debug, print_error, print_success
from aicommit.result import StageResult, capture

EXIT_OK = 0


def _fail(error: AICommitError) -> int:
    print_error(f"Error: {error}")
    return error.exit_code


def _print_staged_overview(collector: DiffCollector, diff: str) -> None:
    files = capture(collector.staged_files)
    if not files.ok:
        return
    print(bold("Staged changes:"))
    for change in files.value:
        print_debug(f"{change.path} (+{change.additions} -{change.deletions})")
    print_debug(f"{len(diff)} chars of diff")


def _print_verbose_stats(generator: MessageGenerator) -> None:
    response = generator.last_response
    print_debug(f"Prompt: ~{len(generator.last_prompt) // 4} tokens ({len(generator.last_prompt)} chars)")
    if response is not None:
        print_debug(f"Response: {response.tokens_used} tokens from {response.model or 'unknown model'}")
    print()


def run_pipeline(
    settings: Settings,
    collector: DiffCollector | None = None,
    client: LLMClient | None = None,
    executor: CommitExecutor | None = None,
    read: Callable[[str], str] = input,
) -> int:
    """Run every stage in order and return the process exit code."""
    key = capture(require_api_key, settings)
    if not key.ok:
        return _fail(key.error)

    collector = collector or DiffCollector()
    diff = collector.collect_staged_diff()
    if not diff.ok:
        return _fail(diff.error)

    if settings.verbose:
        _print_staged_overview(collector, diff.value)

    if client is None:
        client = ClaudeClient(api_key=key.value, model=settings.model, max_tokens=settings.max_tokens)
    generator = MessageGenerator(client)
    print(f"Generating commit message with {info(client.name)}...\n")
    message: StageResult[str] = diff.then(generator.generate)
    if not message.ok:
        return _fail(message.error)

    if settings.verbose:
        _print_verbose_stats(generator)

    if not confirm(message.value, read=read):
        print(dim("\nCommit cancelled. You can use the message above manually if needed."))
        return EXIT_OK

    executor = executor or CommitExecutor(quoting=settings.quoting)
    committed = executor.commit(message.value)
    if not committed.ok:
        print()
        return _fail(committed.error)

    print()
    print_success("Changes committed successfully!")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    settings = load_settings(
        model=args.model,
        shell_quoting=args.shell_quoting,
        verbose=args.verbose,
    )
    return run_pipeline(settings)


def run() -> None:
    """Console script entry point."""
    try:
        code = main()
    except KeyboardInterrupt:
        print()
        print_error("Interrupted.")
        code = 130
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    run()
