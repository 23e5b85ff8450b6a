# =============================================================================
# core/synthesis.py  —  Result Shaping & Synthesis Prompt Construction
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a validated SearchResponse into the payloads the two tools return:
#
#     semantic_search     → results with 4-decimal score strings
#     intelligent_answer  → results + a ready-to-use synthesis prompt
#
# NO ANSWER GENERATION HAPPENS HERE:
#   intelligent_answer does NOT call an LLM.  It builds the context block and
#   the prompt, and the agent on the other side of MCP writes the answer.
#
# The text layout of the context block and prompt is part of the tool's
# output contract, so the templates below should not be reworded casually.
# =============================================================================

from typing import Any

from core.models import SearchResponse, SearchResult

SYNTHESIS_INSTRUCTION = "Please synthesize an answer based on these search results"

_PROMPT_TEMPLATE = (
    'Based on these search results, answer: "{question}"\n'
    "\n"
    "{context}\n"
    "\n"
    "Provide a clear, concise answer using only the information above."
)


def _semantic_entry(result: SearchResult) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "id": result.id,
        "score": result.formatted_score(),
        "content": result.content,
    }
    # Results without a category carry no "category" key at all
    if result.category is not None:
        entry["category"] = result.category
    return entry


def format_semantic_results(response: SearchResponse) -> dict[str, Any]:
    """Payload for semantic_search.

    Result order is preserved.  Scores become fixed 4-decimal strings.
    """
    return {
        "query": response.query,
        "resultsCount": response.results_count,
        "results": [_semantic_entry(r) for r in response.results],
    }


def format_result_block(result: SearchResult, position: int) -> str:
    """One "[Result N]" section of the context (position is 1-based).

    The "Category:" line is left out when the worker sent no category.
    """
    lines = [f"[Result {position}] (Relevance: {result.score})", result.content]
    if result.category is not None:
        lines.append(f"Category: {result.category}")
    return "\n".join(lines)


def build_results_context(results: list[SearchResult]) -> str:
    """All result sections, separated by a blank line."""
    return "\n\n".join(
        format_result_block(result, i) for i, result in enumerate(results, start=1)
    )


def build_synthesis_prompt(question: str, results: list[SearchResult]) -> str:
    return _PROMPT_TEMPLATE.format(question=question, context=build_results_context(results))


def build_answer_payload(question: str, response: SearchResponse) -> dict[str, Any]:
    """Payload for intelligent_answer.

    Args:
        question: The caller's original question (not the worker's echo).
        response: Validated search response.

    Returns:
        A dict with question, instruction, searchResults (the worker's
        result objects untouched), resultsCount and synthesisPrompt.
    """
    return {
        "question": question,
        "instruction": SYNTHESIS_INSTRUCTION,
        "searchResults": response.raw_results,
        "resultsCount": response.results_count,
        "synthesisPrompt": build_synthesis_prompt(question, response.results),
    }
