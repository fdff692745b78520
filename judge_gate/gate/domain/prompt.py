"""Prompt construction for the judge model."""

from judge_gate.gate.domain.task import Task


def build_prompt(task: Task, output: str) -> str:
    """Build the user prompt asking the judge to check ``output`` against ``task``.

    The judge's role framing travels separately as the system instruction.
    Inputs are embedded verbatim; no validation or truncation happens here.
    """
    return (
        "Validate the following task output.\n\n"
        f"## Task\n{task.title}\n\n"
        f"## Requirements\n{task.description}\n\n"
        f"## Output\n{output}\n\n"
        "## Checklist\n"
        "- Does the output meet every stated requirement?\n"
        "- Is the output in the correct format and structure?\n\n"
        "## Response Format\n"
        "Respond with exactly one line and nothing else:\n"
        "PASS: <reason>\n"
        "or\n"
        "FAIL: <reason>"
    )
