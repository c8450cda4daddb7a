# tools/namespace.py
# 네임스페이스 후보 조회 및 컨텍스트별 네임스페이스 지정 MCP 도구입니다.

from typing import List, Optional

from core.context import set_namespace, use_current_context
from core.errors import KubeContextError
from core.namespace import get_all_available_namespaces
from mcp_tools.k8s_mcp_instance import mcp_instance as mcp


@mcp.tool()
def list_namespaces() -> List[str]:
    """기본 네임스페이스와 컨텍스트에서 사용 중인 네임스페이스를 정렬된 목록으로 반환합니다."""
    return get_all_available_namespaces()


@mcp.tool()
@use_current_context
def set_context_namespace(namespace: str, context_name: Optional[str] = None) -> str:
    """
    컨텍스트의 기본 네임스페이스를 지정합니다. 목록에 없는 새 네임스페이스도 지정할 수 있습니다.

    Args:
        namespace (str): 지정할 네임스페이스. 빈 문자열이면 네임스페이스 설정을 제거합니다.
        context_name (str, 선택 사항): 대상 컨텍스트. 생략하면 현재 컨텍스트를 사용합니다.
    """
    if context_name is None:
        return "오류: 대상 컨텍스트가 없습니다. 컨텍스트 이름을 지정해주세요."

    try:
        set_namespace(context_name, namespace)
    except KubeContextError as e:
        return f"오류: 네임스페이스 지정 실패 - {e}"

    if namespace.strip():
        return f"'{context_name}' 컨텍스트의 네임스페이스를 '{namespace.strip()}'(으)로 지정했습니다."
    return f"'{context_name}' 컨텍스트의 네임스페이스 설정을 제거했습니다. (default 사용)"
