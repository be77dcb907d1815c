"""
================================================================================
TUTORIAL FLOW - FLOW DEFINITION
================================================================================
Wires the six steps into one PocketFlow Flow:

    FetchRepo → IdentifyAbstractions → AnalyzeRelationships →
    OrderChapters → WriteChapters → CombineTutorial

The order is fixed before the run starts. Flow.run(shared) executes the
steps one at a time against the same SharedState; the first step that fails
stops the run and leaves the state as it was for inspection.
================================================================================
"""

from pocketflow import Flow

from nodes import (
    FetchRepo,
    IdentifyAbstractions,
    AnalyzeRelationships,
    OrderChapters,
    WriteChapters,
    CombineTutorial,
)
from constants.llm import DEFAULT_LLM_MAX_RETRIES, DEFAULT_LLM_RETRY_WAIT


def create_tutorial_flow(
    remote_crawler=None,
    max_retries=DEFAULT_LLM_MAX_RETRIES,
    wait=DEFAULT_LLM_RETRY_WAIT,
):
    """
    Create the codebase tutorial generation flow.

    Steps that call the LLM get max_retries attempts with wait seconds in
    between. FetchRepo and CombineTutorial only touch the file system and run
    once.

    Args:
        remote_crawler: Optional callable used by FetchRepo for repo_url sources
        max_retries: Total attempts for each LLM step
        wait: Seconds between attempts

    Returns:
        Flow: A PocketFlow Flow ready to be run with a SharedState
    """
    fetch_repo = FetchRepo(remote_crawler=remote_crawler)
    identify_abstractions = IdentifyAbstractions(max_retries=max_retries, wait=wait)
    analyze_relationships = AnalyzeRelationships(max_retries=max_retries, wait=wait)
    order_chapters = OrderChapters(max_retries=max_retries, wait=wait)
    write_chapters = WriteChapters(max_retries=max_retries, wait=wait)
    combine_tutorial = CombineTutorial()

    fetch_repo >> identify_abstractions
    identify_abstractions >> analyze_relationships
    analyze_relationships >> order_chapters
    order_chapters >> write_chapters
    write_chapters >> combine_tutorial

    return Flow(start=fetch_repo)
