# core/recent.py
# 최근에 전환한 컨텍스트 이름 목록(최신순, 중복 없음, 길이 제한)을 관리합니다.
# 상태는 kubeconfig와 별개인 작은 키-값 저장소에 보관되며, 저장소는 생성자에서 주입받습니다.

import json  # 목록 직렬화 및 상태 파일 처리를 위해 사용합니다.
import logging  # 상태 파일 읽기 실패 로그를 위해 사용합니다.
import os  # 상태 파일 경로 조작을 위해 사용합니다.
from typing import Dict, Iterable, List, Optional, Protocol, Union  # 타입 힌트를 위해 사용합니다.

from core.errors import RecentStoreError
from core.settings import DEFAULT_RECENT_MAX, load_settings
from models.context import ContextInfo

logger = logging.getLogger(__name__)

RECENT_CONTEXTS_KEY = "recentContexts"


class KeyValueStore(Protocol):
    """이름 하나에 문자열 값 하나를 저장하는 영속 저장소 인터페이스입니다."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """프로세스 메모리에만 값을 보관하는 저장소. 테스트나 일회성 실행에 사용합니다."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFileStore:
    """
    JSON 파일 하나에 모든 키-값을 저장하는 저장소입니다.

    파일이 없거나 손상된 경우 읽기는 빈 상태로 간주하고,
    쓰기 실패는 RecentStoreError로 호출자에게 전달합니다.
    """

    def __init__(self, path: str):
        self.path = os.path.expanduser(path)

    def _read_data(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Failed to read state file %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Optional[str]:
        value = self._read_data().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read_data()
        data[key] = value
        try:
            os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.error("Failed to write state file %s: %s", self.path, e)
            raise RecentStoreError(f"Failed to write state file {self.path}: {e}") from e


class RecentContexts:
    """
    최근 전환한 컨텍스트 목록을 관리하는 클래스입니다.

    Attributes:
        store (KeyValueStore): 목록을 보관할 저장소.
        max_items (int): 보관할 최대 개수.
    """

    def __init__(self, store: KeyValueStore, max_items: int = DEFAULT_RECENT_MAX):
        if max_items < 1:
            raise ValueError("max_items must be at least 1")
        self.store = store
        self.max_items = max_items

    def _load(self) -> List[str]:
        raw = self.store.get(RECENT_CONTEXTS_KEY)
        if not raw:
            return []
        try:
            names = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring malformed recent contexts value: %r", raw)
            return []
        if not isinstance(names, list):
            return []
        return [n for n in names if isinstance(n, str)]

    def get_recent_contexts(self, contexts: Optional[Iterable[Union[ContextInfo, str]]] = None) -> List[str]:
        """
        최근 컨텍스트 이름 목록을 최신순으로 반환합니다.

        Args:
            contexts: 현재 kubeconfig의 컨텍스트 목록(ContextInfo 또는 이름).
                      주어지면 목록에 없는 이름은 결과에서 제외합니다. 저장된 값은 변경하지 않습니다.
        """
        names = self._load()
        if contexts is not None:
            known = {c.name if isinstance(c, ContextInfo) else c for c in contexts}
            names = [n for n in names if n in known]
        return names[:self.max_items]

    def add_recent_context(self, context_name: str) -> List[str]:
        """
        컨텍스트 이름을 목록 맨 앞에 추가합니다. 이미 있으면 앞으로 이동하고, 최대 개수를 넘으면 가장 오래된 항목을 버립니다.

        Returns:
            List[str]: 저장된 새 목록.

        Raises:
            RecentStoreError: 저장소 쓰기에 실패한 경우.
        """
        names = [n for n in self._load() if n != context_name]
        names.insert(0, context_name)
        names = names[:self.max_items]
        self.store.set(RECENT_CONTEXTS_KEY, json.dumps(names))
        return names


def create_recent_contexts(settings=None) -> RecentContexts:
    """설정 값(상태 파일 경로, 최대 개수)으로 파일 기반 RecentContexts를 생성합니다."""
    settings = settings or load_settings()
    return RecentContexts(JsonFileStore(settings.state_file), settings.recent_max)
