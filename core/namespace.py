# core/namespace.py
# 컨텍스트에 지정할 수 있는 네임스페이스 후보 목록을 계산합니다.
# 후보 목록은 참고용이며, 목록에 없는 새 네임스페이스를 지정하는 것도 허용됩니다.

from typing import Any, Dict, List, Optional, Set

from core.kubeconfig import CONTEXTS_KEY, as_text, get_kubeconfig

# 항상 제공되는 Kubernetes 기본 네임스페이스
COMMON_NAMESPACES = (
    "default",
    "kube-system",
    "kube-public",
    "kube-node-lease",
)


def get_common_namespaces() -> List[str]:
    """Kubernetes 클러스터에 기본으로 존재하는 네임스페이스 목록을 반환합니다."""
    return list(COMMON_NAMESPACES)


def get_namespaces_from_contexts(config_data: Optional[Dict[str, Any]] = None) -> Set[str]:
    """
    컨텍스트에 이미 지정된 네임스페이스들을 모읍니다. "default"는 항상 포함됩니다.

    Args:
        config_data: 파싱된 kubeconfig 문서. 생략하면 파일에서 새로 읽습니다.
    """
    if config_data is None:
        config_data = get_kubeconfig()

    namespaces = {"default"}
    entries = config_data.get(CONTEXTS_KEY) or []
    if not isinstance(entries, list):
        return namespaces

    for entry in entries:
        if not isinstance(entry, dict):
            continue
        context_data = entry.get("context")
        if not isinstance(context_data, dict):
            continue
        namespace = as_text(context_data.get("namespace"))
        if namespace:
            namespaces.add(namespace)
    return namespaces


def get_all_available_namespaces(config_data: Optional[Dict[str, Any]] = None) -> List[str]:
    """기본 네임스페이스와 컨텍스트에서 사용 중인 네임스페이스를 합쳐 정렬된 목록으로 반환합니다."""
    return sorted(set(get_common_namespaces()) | get_namespaces_from_contexts(config_data))
