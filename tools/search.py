# tools/search.py
# 컨텍스트 검색, 필터 후보, 최근 컨텍스트 조회 MCP 도구입니다.

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from core.context import get_contexts
from core.recent import create_recent_contexts
from core.search import get_filter_options as build_filter_options
from core.search import highlight_matches, search_contexts as run_search
from core.settings import load_settings
from mcp_tools.k8s_mcp_instance import mcp_instance as mcp
from models.context import SearchFilters


@mcp.tool()
def search_contexts(
    query: str = "",
    cluster: Optional[str] = None,
    namespace: Optional[str] = None,
    show_only_current: bool = False,
    show_only_with_namespace: bool = False,
) -> List[Dict[str, Any]]:
    """
    이름, 클러스터, 사용자, 네임스페이스를 대상으로 컨텍스트를 검색합니다.

    Args:
        query (str): 검색어 (대소문자 무시). 비어 있으면 필터만 적용합니다.
        cluster (str, 선택 사항): 클러스터 이름 완전 일치 필터.
        namespace (str, 선택 사항): 네임스페이스 완전 일치 필터.
        show_only_current (bool): 현재 컨텍스트만 표시.
        show_only_with_namespace (bool): 네임스페이스가 지정된 컨텍스트만 표시.

    Returns:
        List[dict]: 관련도 순 검색 결과. 각 항목에는 강조 표시된 필드(highlighted)가 포함됩니다.
    """
    filters = SearchFilters(
        query=query,
        cluster=cluster or None,
        namespace=namespace or None,
        show_only_current=show_only_current,
        show_only_with_namespace=show_only_with_namespace,
    )
    marker = load_settings().highlight_marker

    results = []
    for result in run_search(get_contexts(), filters):
        item = result.to_dict()
        ctx = result.context
        item["highlighted"] = {
            "name": highlight_matches(ctx.name, query, marker),
            "cluster": highlight_matches(ctx.cluster, query, marker),
            "user": highlight_matches(ctx.user, query, marker),
            "namespace": highlight_matches(ctx.namespace or "", query, marker),
        }
        results.append(item)
    return results


@mcp.tool()
def get_filter_options() -> Dict[str, List[str]]:
    """검색 필터에 사용할 수 있는 클러스터와 네임스페이스 목록을 반환합니다."""
    return asdict(build_filter_options(get_contexts()))


@mcp.tool()
def get_recent_contexts() -> List[str]:
    """최근에 전환한 컨텍스트 이름을 최신순으로 반환합니다. kubeconfig에 없는 이름은 제외됩니다."""
    return create_recent_contexts().get_recent_contexts(get_contexts())
