import logging
import uuid
from collections import OrderedDict
from typing import Optional

from voter_guide.core import config
from voter_guide.models.decision_tree import QuestionnaireView
from voter_guide.services.navigator import Navigator
from voter_guide.services.tree_provider import CachedTreeSource, TreeProvider, build_tree_provider

logger = logging.getLogger(__name__)


class QuestionnaireService:
    def __init__(self, provider: Optional[TreeProvider] = None, max_sessions: Optional[int] = None):
        # One cached source per service, so the tree is fetched once for every visitor
        self.tree_source = CachedTreeSource(provider or build_tree_provider())
        # In-memory storage for navigators, least recently used first; nothing survives a restart
        self.sessions: "OrderedDict[str, Navigator]" = OrderedDict()
        self.max_sessions = max_sessions or config.MAX_SESSIONS

    async def create_session(self) -> str:
        session_id = str(uuid.uuid4())
        self.sessions[session_id] = await Navigator.create(self.tree_source)
        logger.info(f"Created questionnaire session {session_id}")
        while len(self.sessions) > self.max_sessions:
            evicted, _ = self.sessions.popitem(last=False)
            logger.info(f"Evicted questionnaire session {evicted}")
        return session_id

    def get_session(self, session_id: str) -> Optional[Navigator]:
        navigator = self.sessions.get(session_id)
        if navigator is not None:
            self.sessions.move_to_end(session_id)
        return navigator

    def _require(self, session_id: str) -> Navigator:
        navigator = self.get_session(session_id)
        if not navigator:
            raise ValueError("Session not found")
        return navigator

    def get_view(self, session_id: str) -> QuestionnaireView:
        return self._require(session_id).view()

    def select_option(self, session_id: str, option_id: str) -> QuestionnaireView:
        navigator = self._require(session_id)
        navigator.select_option(option_id)
        return navigator.view()

    def back(self, session_id: str) -> QuestionnaireView:
        navigator = self._require(session_id)
        navigator.back()
        return navigator.view()

    def start_over(self, session_id: str) -> QuestionnaireView:
        navigator = self._require(session_id)
        navigator.start_over()
        return navigator.view()

    def end_session(self, session_id: str) -> bool:
        return self.sessions.pop(session_id, None) is not None

    async def tree_status(self) -> str:
        result = await self.tree_source.get()
        return "error" if result.is_error else "ok"
