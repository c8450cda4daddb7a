# models/context.py
# 이 파일은 Kubernetes 컨텍스트 정보와 검색 관련 값 객체를 정의하는 데이터 클래스들을 포함합니다.
# 모든 객체는 값으로 전달되며, kubeconfig 원본 문서를 직접 참조하지 않습니다.

from dataclasses import dataclass, field, asdict  # 데이터 클래스 생성을 위해 사용합니다.
from typing import Any, Dict, List, Optional  # 타입 힌트를 위해 사용합니다.

# 검색 점수 계산 대상 필드 (가중치 순서와 동일)
SEARCH_FIELDS = ("name", "cluster", "user", "namespace")


@dataclass
class ContextInfo:
    """
    Kubernetes 컨텍스트의 정보를 나타내는 데이터 클래스입니다.

    Attributes:
        name (str): 컨텍스트의 이름.
        cluster (str): 컨텍스트가 속한 클러스터의 이름.
        user (str): 컨텍스트에 연결된 사용자의 이름.
        namespace (Optional[str]): 컨텍스트에 지정된 네임스페이스. 없으면 None.
        current (bool): 이 컨텍스트가 현재 활성화된 컨텍스트인지 여부.
    """
    name: str  # 컨텍스트 이름
    cluster: str  # 클러스터 이름
    user: str  # 사용자 이름
    namespace: Optional[str] = None  # 네임스페이스 (미지정 시 None)
    current: bool = False  # 현재 활성 컨텍스트 여부

    @property
    def display_namespace(self) -> str:
        """화면 표시용 네임스페이스. 지정되지 않았으면 "default"입니다."""
        return self.namespace or "default"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SearchFilters:
    """
    컨텍스트 검색 조건입니다.

    Attributes:
        query (str): 자유 검색어. 비어 있으면 점수 계산 없이 모든 후보가 동일한 점수를 받습니다.
        cluster (Optional[str]): 클러스터 이름 완전 일치 필터.
        namespace (Optional[str]): 네임스페이스 완전 일치 필터.
        show_only_current (bool): 현재 컨텍스트만 표시할지 여부.
        show_only_with_namespace (bool): 네임스페이스가 지정된 컨텍스트만 표시할지 여부.
    """
    query: str = ""
    cluster: Optional[str] = None
    namespace: Optional[str] = None
    show_only_current: bool = False
    show_only_with_namespace: bool = False


@dataclass
class SearchResult:
    """검색 결과 한 건. 저장되지 않는 일회성 객체입니다."""
    context: ContextInfo
    relevance_score: float
    matched_fields: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "context": self.context.to_dict(),
            "relevance_score": self.relevance_score,
            "matched_fields": list(self.matched_fields),
        }


@dataclass
class FilterOptions:
    """필터 드롭다운 등에 제공할 클러스터/네임스페이스 후보 목록입니다."""
    clusters: List[str] = field(default_factory=list)
    namespaces: List[str] = field(default_factory=list)


@dataclass
class KubeconfigInfo:
    """kubeconfig 파일 자체에 대한 요약 정보입니다."""
    path: str
    available: bool
    context_count: int = 0
    current_context: Optional[str] = None
