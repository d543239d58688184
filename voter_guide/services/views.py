"""Derived views over a tree result and a navigation state.

Every function is pure. ``None`` means "suppressed": the view has nothing to
show for this combination and channels built on it stay silent.
"""
from typing import List, Optional
from voter_guide.core import config
from voter_guide.models.decision_tree import (
    INITIAL_ID,
    NavigationState,
    OptionView,
    QuestionnaireView,
    TreeNode,
    TreeResult,
)


def prompt_text(result: TreeResult, state: NavigationState) -> Optional[str]:
    if result.is_error:
        return None
    if state.is_initial:
        return config.INTRO_PROMPT

    labels = []
    for node_id in state.path:
        node = result.tree.get(node_id)
        labels.append(node.label if node and node.label else "")
    return (" ".join(labels) + "...").strip()


def options(result: TreeResult, state: NavigationState) -> Optional[List[TreeNode]]:
    if result.is_error:
        return None
    node = result.tree.get(state.current_id)
    if node is None or not node.options:
        return None
    return result.tree.children_of(state.current_id)


def is_beyond_start(result: Optional[TreeResult], state: NavigationState) -> Optional[bool]:
    # Available before the tree resolves; silenced only by a failed tree
    if result is not None and result.is_error:
        return None
    return state.current_id != INITIAL_ID


def outcome_id(result: TreeResult, state: NavigationState) -> Optional[int]:
    if result.is_error:
        return None
    node = result.tree.get(state.current_id)
    if node is None or not node.is_terminal:
        return None
    return node.outcome_id


def snapshot(result: Optional[TreeResult], state: NavigationState) -> QuestionnaireView:
    """Collects every view into one serializable object."""
    beyond = is_beyond_start(result, state)
    if result is None:
        return QuestionnaireView(is_beyond_start=bool(beyond))
    if result.is_error:
        return QuestionnaireView(has_error=True)

    nodes = options(result, state) or []
    return QuestionnaireView(
        prompt=prompt_text(result, state),
        options=[OptionView(id=n.id, label=n.label) for n in nodes],
        is_beyond_start=bool(beyond),
        outcome_id=outcome_id(result, state),
    )
