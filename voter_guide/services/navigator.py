import logging
from typing import List, Optional

from voter_guide.core.observable import Channel, StateChannel
from voter_guide.models.decision_tree import (
    NavigationState,
    QuestionnaireView,
    TreeNode,
    TreeResult,
)
from voter_guide.services import views
from voter_guide.services.tree_provider import CachedTreeSource

logger = logging.getLogger(__name__)


class Navigator:
    """Tracks one visitor's path through the decision tree.

    The navigation state is replaced on every operation and broadcast on
    ``state``. Derived channels (``prompt_text``, ``options``,
    ``is_beyond_start``, ``outcome``) are recomputed after each change and
    stay silent whenever their view is suppressed. ``has_error`` emits
    ``True`` once if the tree failed to load; from then on nothing else is
    emitted.
    """

    def __init__(self, tree_source: CachedTreeSource):
        self.tree_source = tree_source
        self._tree: Optional[TreeResult] = None

        self.state: StateChannel[NavigationState] = StateChannel(NavigationState(), name="state")
        self.prompt_text: Channel[str] = Channel("prompt_text")
        self.options: Channel[List[TreeNode]] = Channel("options")
        self.is_beyond_start: Channel[bool] = Channel("is_beyond_start")
        self.has_error: Channel[bool] = Channel("has_error")
        self.outcome: Channel[Optional[int]] = Channel("outcome")

        self.state.subscribe(self._on_state)

    @classmethod
    async def create(cls, tree_source: CachedTreeSource) -> "Navigator":
        navigator = cls(tree_source)
        await navigator.load()
        return navigator

    async def load(self):
        """Resolves the shared tree and publishes the first full set of views."""
        if self._tree is not None:
            return
        result = await self.tree_source.get()
        # An overlapping load may have finished while we waited
        if self._tree is not None:
            return
        self._tree = result
        if result.is_error:
            logger.warning(f"Questionnaire unavailable: {result.reason}")
            self.has_error.emit(True)
            return
        self._publish(self.state.get())

    @property
    def tree(self) -> Optional[TreeResult]:
        return self._tree

    @property
    def snapshot(self) -> NavigationState:
        return self.state.get()

    def select_option(self, option_id: str) -> None:
        logger.debug(f"select_option {option_id} at {self.snapshot.current_id}")
        self.state.set(NavigationState(path=self.snapshot.path + (option_id,)))

    def back(self) -> None:
        path = self.snapshot.path
        if len(path) < 2:
            return
        logger.debug(f"back from {path[-1]} to {path[-2]}")
        self.state.set(NavigationState(path=path[:-1]))

    def start_over(self) -> None:
        logger.debug("start_over")
        self.state.set(NavigationState())

    def view(self) -> QuestionnaireView:
        return views.snapshot(self._tree, self.snapshot)

    def _on_state(self, state: NavigationState):
        self._publish(state)

    def _publish(self, state: NavigationState):
        result = self._tree
        if result is not None and result.is_error:
            return

        beyond = views.is_beyond_start(result, state)
        if result is None:
            self.is_beyond_start.emit(beyond)
            return

        self.prompt_text.emit(views.prompt_text(result, state))
        nodes = views.options(result, state)
        if nodes is not None:
            self.options.emit(nodes)
        self.is_beyond_start.emit(beyond)
        self.outcome.emit(views.outcome_id(result, state))
