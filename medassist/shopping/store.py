"""
ShoppingSessionStore: 进程内的购物会话注册表。

会话只存在内存里，不落库；浏览器通过 Django session cookie 里的
shopping_session_id 找回自己的 CheckoutSession。超过上限时淘汰最久未访问的会话。
"""

import threading
from collections import OrderedDict
from typing import Optional

from .checkout import CheckoutSession

DEFAULT_MAX_SESSIONS = 10000


class ShoppingSessionStore:

    def __init__(self, max_sessions: int = DEFAULT_MAX_SESSIONS):
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, CheckoutSession]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def get(self, session_id: str) -> Optional[CheckoutSession]:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is not None:
                self._sessions.move_to_end(session_id)
            return session

    def get_or_create(self, session_id: Optional[str] = None) -> CheckoutSession:
        with self._lock:
            if session_id and session_id in self._sessions:
                self._sessions.move_to_end(session_id)
                return self._sessions[session_id]

            session = CheckoutSession(session_id=session_id)
            self._sessions[session.session_id] = session
            while len(self._sessions) > self.max_sessions:
                self._sessions.popitem(last=False)
            return session

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()


shopping_sessions = ShoppingSessionStore()
