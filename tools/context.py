# tools/context.py
# 컨텍스트 조회 및 전환 MCP 도구들을 정의합니다.
# 코어 함수가 던지는 예외를 사용자에게 보여줄 메시지로 바꾸고,
# 전환이 실제로 저장된 경우에만 최근 컨텍스트 목록을 갱신합니다.

import logging
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from core import context as kube_context  # 컨텍스트 저장소 함수들
from core.errors import KubeContextError
from core.kubeconfig import get_kubeconfig_info as read_kubeconfig_info
from core.recent import RecentContexts, create_recent_contexts
from mcp_tools.k8s_mcp_instance import mcp_instance as mcp

logger = logging.getLogger(__name__)


def _record_recent(recent: RecentContexts, context_name: str) -> Optional[str]:
    """최근 목록에 기록합니다. 실패하면 경고 메시지를 반환합니다."""
    try:
        recent.add_recent_context(context_name)
    except KubeContextError as e:
        logger.warning("Context switched but recent list was not updated: %s", e)
        return f"(최근 목록 갱신 실패: {e})"
    return None


@mcp.tool()
def list_contexts() -> List[Dict[str, Any]]:
    """kubeconfig에 정의된 모든 컨텍스트를 문서 순서대로 반환합니다."""
    return [ctx.to_dict() for ctx in kube_context.get_contexts()]


@mcp.tool()
def get_current_context() -> str:
    """현재 활성화된 컨텍스트 이름과 네임스페이스를 알려줍니다."""
    current_name = kube_context.get_current_context_name()
    if current_name is None:
        return "현재 설정된 컨텍스트가 없습니다."

    context = kube_context.get_context(current_name)
    if context is None:
        # current-context가 존재하지 않는 컨텍스트를 가리키는 경우 (자동 복구하지 않음)
        return f"현재 컨텍스트 '{current_name}'가 kubeconfig에 존재하지 않습니다."
    return f"현재 컨텍스트: {context.name} (클러스터: {context.cluster}, 네임스페이스: {context.display_namespace})"


@mcp.tool()
def get_kubeconfig_info() -> Dict[str, Any]:
    """kubeconfig 파일 경로, 사용 가능 여부, 컨텍스트 개수, 현재 컨텍스트를 반환합니다."""
    return asdict(read_kubeconfig_info())


@mcp.tool()
def switch_context(context_name: str) -> str:
    """
    현재 컨텍스트를 지정된 컨텍스트로 전환합니다.

    Args:
        context_name (str): 전환할 컨텍스트 이름.

    Returns:
        str: 결과 메시지. 실패한 경우 오류 메시지를 반환합니다.
    """
    return switch_context_with_namespace(context_name)


@mcp.tool()
def switch_context_with_namespace(context_name: str, namespace: Optional[str] = None) -> str:
    """
    컨텍스트를 전환하면서 네임스페이스도 함께 지정합니다. 두 변경은 한 번에 저장됩니다.

    Args:
        context_name (str): 전환할 컨텍스트 이름.
        namespace (str, 선택 사항): 지정할 네임스페이스. 생략하거나 공백뿐이면 기존 네임스페이스를 유지합니다.
    """
    # 설정 오류는 kubeconfig를 쓰기 전에 드러나도록 트래커를 먼저 만듭니다.
    try:
        recent = create_recent_contexts()
    except ValueError as e:
        return f"오류: 설정 값이 올바르지 않습니다 - {e}"

    namespace = (namespace or "").strip()
    try:
        kube_context.switch_context_with_namespace(context_name, namespace)
    except KubeContextError as e:
        return f"오류: 컨텍스트 전환 실패 - {e}"

    if namespace:
        message = f"컨텍스트를 '{context_name}'(으)로 전환하고 네임스페이스를 '{namespace}'(으)로 지정했습니다."
    else:
        message = f"컨텍스트를 '{context_name}'(으)로 전환했습니다."
    warning = _record_recent(recent, context_name)
    return f"{message} {warning}" if warning else message
