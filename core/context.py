# core/context.py
# 이 파일은 kubeconfig 문서를 컨텍스트 목록으로 변환하고, 현재 컨텍스트 전환 및
# 네임스페이스 지정 같은 변경 작업을 수행하는 함수들을 포함합니다.
# 모든 변경 작업은 직전에 파일을 다시 읽고, 변경 후 한 번만 저장합니다. (캐시 없음)

import inspect  # 함수 시그니처를 검사하기 위해 사용합니다.
import logging  # 변경 작업 로그 기록을 위해 사용합니다.
from functools import wraps  # 데코레이터 작성을 위해 사용합니다.
from typing import Any, Callable, Dict, List, Optional  # 타입 힌트를 위해 사용합니다.

from core.errors import ContextNotFoundError
from core.kubeconfig import (
    CURRENT_CONTEXT_KEY,
    as_text,
    context_entries,
    get_kubeconfig,
    get_kubeconfig_path,
    save_kubeconfig,
)
from models.context import ContextInfo

logger = logging.getLogger(__name__)


def _find_entry(config_data: Dict[str, Any], context_name: str) -> Optional[Dict[str, Any]]:
    """
    이름이 일치하는 컨텍스트 항목을 찾습니다.
    같은 이름이 여러 번 등장하면 마지막 항목이 이깁니다. (목록 조회는 문서 순서를 그대로 유지)
    """
    found = None
    for entry in context_entries(config_data):
        if as_text(entry["name"]) == context_name:
            found = entry
    return found


def _to_context_info(entry: Dict[str, Any], current_name: Optional[str]) -> ContextInfo:
    context_data = entry.get("context")
    if not isinstance(context_data, dict):
        context_data = {}
    name = as_text(entry["name"])
    return ContextInfo(
        name=name,
        cluster=as_text(context_data.get("cluster")) or "",
        user=as_text(context_data.get("user")) or "",
        # 빈 문자열 네임스페이스는 미지정으로 취급합니다.
        namespace=as_text(context_data.get("namespace")),
        current=(name == current_name),
    )


def _apply_namespace(entry: Dict[str, Any], namespace: Optional[str]) -> None:
    """
    컨텍스트 항목에 네임스페이스를 기록합니다.
    빈 값이면 "default" 문자열을 저장하지 않고 namespace 키 자체를 제거합니다.
    """
    context_data = entry.get("context")
    if not isinstance(context_data, dict):
        context_data = {}
        entry["context"] = context_data

    namespace = (namespace or "").strip()
    if namespace:
        context_data["namespace"] = namespace
    else:
        context_data.pop("namespace", None)


def get_contexts(kubeconfig_path: Optional[str] = None) -> List[ContextInfo]:
    """
    kubeconfig 파일에서 모든 컨텍스트를 읽어 문서 순서대로 반환합니다.

    Args:
        kubeconfig_path (Optional[str]): kubeconfig 경로. 생략하면 기본 위치를 사용합니다.

    Returns:
        List[ContextInfo]: 각 컨텍스트의 이름, 클러스터, 사용자, 네임스페이스 및
                           현재 컨텍스트 여부를 담은 객체 리스트. 파일이 없으면 빈 리스트.
    """
    config_data = get_kubeconfig(kubeconfig_path)
    current_name = as_text(config_data.get(CURRENT_CONTEXT_KEY))
    return [_to_context_info(entry, current_name) for entry in context_entries(config_data)]


def get_context(context_name: str, kubeconfig_path: Optional[str] = None) -> Optional[ContextInfo]:
    """이름으로 컨텍스트 하나를 조회합니다. 없으면 None을 반환합니다."""
    config_data = get_kubeconfig(kubeconfig_path)
    entry = _find_entry(config_data, context_name)
    if entry is None:
        return None
    return _to_context_info(entry, as_text(config_data.get(CURRENT_CONTEXT_KEY)))


def get_current_context_name(kubeconfig_path: Optional[str] = None) -> Optional[str]:
    """
    현재 활성화된 Kubernetes 컨텍스트의 이름을 반환합니다.

    Returns:
        Optional[str]: current-context 값. 설정되어 있지 않으면 None.
    """
    return as_text(get_kubeconfig(kubeconfig_path).get(CURRENT_CONTEXT_KEY))


def get_default_namespace(context_name: str, kubeconfig_path: Optional[str] = None) -> str:
    """
    주어진 컨텍스트에 설정된 네임스페이스를 반환합니다.
    네임스페이스가 지정되어 있지 않거나 컨텍스트가 없으면 "default"를 반환합니다.
    """
    context = get_context(context_name, kubeconfig_path)
    if context is None:
        return "default"
    return context.display_namespace


def switch_context(context_name: str, kubeconfig_path: Optional[str] = None) -> bool:
    """
    현재 컨텍스트를 지정된 컨텍스트로 전환하고 kubeconfig에 저장합니다.

    Args:
        context_name (str): 전환할 컨텍스트 이름.
        kubeconfig_path (Optional[str]): kubeconfig 경로.

    Returns:
        bool: 저장까지 성공하면 True.

    Raises:
        ContextNotFoundError: 해당 이름의 컨텍스트가 없는 경우. 파일은 변경되지 않습니다.
        KubeconfigWriteError: 파일 저장에 실패한 경우.
    """
    return switch_context_with_namespace(context_name, None, kubeconfig_path)


def switch_context_with_namespace(
    context_name: str,
    namespace: Optional[str] = None,
    kubeconfig_path: Optional[str] = None,
) -> bool:
    """
    컨텍스트를 전환하면서 선택적으로 네임스페이스도 지정합니다.

    네임스페이스가 주어지면 먼저 같은 문서에 네임스페이스를 기록한 뒤 current-context를 바꾸고,
    두 변경을 한 번의 쓰기로 저장합니다. 네임스페이스만 바뀐 중간 상태는 파일에 남지 않습니다.
    네임스페이스가 None이거나 공백뿐인 문자열이면 기존 네임스페이스는 그대로 둡니다.

    Raises:
        ContextNotFoundError: 해당 이름의 컨텍스트가 없는 경우.
        KubeconfigWriteError: 파일 저장에 실패한 경우.
    """
    path = kubeconfig_path or get_kubeconfig_path()
    config_data = get_kubeconfig(path)

    entry = _find_entry(config_data, context_name)
    if entry is None:
        raise ContextNotFoundError(context_name)

    namespace = (namespace or "").strip()
    if namespace:
        _apply_namespace(entry, namespace)
    config_data[CURRENT_CONTEXT_KEY] = context_name

    save_kubeconfig(config_data, path)
    if namespace:
        logger.info("Switched to context %s (namespace %s)", context_name, namespace)
    else:
        logger.info("Switched to context %s", context_name)
    return True


def set_namespace(context_name: str, namespace: str, kubeconfig_path: Optional[str] = None) -> bool:
    """
    컨텍스트의 네임스페이스를 지정합니다. 빈 문자열은 네임스페이스 해제를 의미합니다.

    Args:
        context_name (str): 대상 컨텍스트 이름.
        namespace (str): 지정할 네임스페이스. 목록에 없는 새 이름도 허용됩니다.

    Returns:
        bool: 저장까지 성공하면 True.

    Raises:
        ContextNotFoundError: 해당 이름의 컨텍스트가 없는 경우.
        KubeconfigWriteError: 파일 저장에 실패한 경우.
    """
    path = kubeconfig_path or get_kubeconfig_path()
    config_data = get_kubeconfig(path)

    entry = _find_entry(config_data, context_name)
    if entry is None:
        raise ContextNotFoundError(context_name)

    _apply_namespace(entry, namespace)
    save_kubeconfig(config_data, path)
    logger.info("Set namespace of context %s to %s", context_name, namespace or "<unset>")
    return True


def use_current_context(func: Callable) -> Callable:
    """
    함수가 호출될 때 `context_name` 인자가 None이거나 제공되지 않은 경우,
    자동으로 현재 활성화된 컨텍스트 이름을 사용하도록 하는 데코레이터입니다.
    현재 컨텍스트도 없다면 None이 그대로 전달됩니다.
    """

    @wraps(func)  # 원본 함수의 메타데이터(이름, 독스트링 등)를 유지합니다.
    def wrapper(*args, **kwargs):
        sig = inspect.signature(func)
        if "context_name" in sig.parameters:
            # 위치 인자로 전달된 값도 확인하기 위해 시그니처에 바인딩합니다.
            bound = sig.bind_partial(*args, **kwargs)
            if bound.arguments.get("context_name") is None:
                bound.arguments["context_name"] = get_current_context_name()
            return func(*bound.args, **bound.kwargs)
        return func(*args, **kwargs)

    return wrapper
