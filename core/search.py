# core/search.py
# 컨텍스트 목록에 대해 필터링, 관련도 점수 계산, 정렬, 검색어 강조를 수행하는 검색 엔진입니다.
# 입력 목록을 변경하지 않으며, 파일 I/O도 하지 않습니다. (순수 함수)

import re  # 대소문자 무시 검색어 강조를 위해 사용합니다.
from typing import Dict, Iterable, List, Optional, Tuple  # 타입 힌트를 위해 사용합니다.

from core.settings import DEFAULT_HIGHLIGHT_MARKER
from models.context import SEARCH_FIELDS, ContextInfo, FilterOptions, SearchFilters, SearchResult

# 필드 값과 검색어의 일치 정도에 따른 점수
EXACT_MATCH_SCORE = 100
PREFIX_MATCH_SCORE = 75
SUBSTRING_MATCH_SCORE = 50

# 필드별 가중치: 이름 > 클러스터/사용자 > 네임스페이스
FIELD_WEIGHTS: Dict[str, float] = {
    "name": 1.0,
    "cluster": 0.8,
    "user": 0.8,
    "namespace": 0.6,
}

# 가장 높은 필드 외에 추가로 일치한 필드 하나당 보너스
EXTRA_FIELD_BONUS = 5
MAX_SCORE = 100


def normalize_query(query: Optional[str]) -> str:
    """검색어 앞뒤 공백을 제거합니다. 공백만 있는 검색어는 빈 검색어가 됩니다."""
    return (query or "").strip()


def match_quality(value: Optional[str], query: str) -> int:
    """
    하나의 필드 값이 검색어와 얼마나 일치하는지 점수로 반환합니다.

    Args:
        value: 필드 값. None이나 빈 문자열은 일치하지 않습니다.
        query: 정규화된(공백 제거된) 검색어.

    Returns:
        int: 완전 일치 100, 접두어 일치 75, 부분 문자열 일치 50, 불일치 0.
    """
    if not value or not query:
        return 0
    value_folded = value.casefold()
    query_folded = query.casefold()
    if value_folded == query_folded:
        return EXACT_MATCH_SCORE
    if value_folded.startswith(query_folded):
        return PREFIX_MATCH_SCORE
    if query_folded in value_folded:
        return SUBSTRING_MATCH_SCORE
    return 0


def score_context(context: ContextInfo, query: str) -> Tuple[float, List[str]]:
    """
    컨텍스트의 관련도 점수(0~100)와 점수에 기여한 필드 목록을 계산합니다.

    가장 높은 가중 필드 점수를 기본값으로 하고, 그 외 일치한 필드마다 보너스를 더한 뒤 100으로 제한합니다.
    네임스페이스가 지정되지 않은 컨텍스트는 "default"로 간주하지 않습니다.
    """
    weighted: Dict[str, float] = {}
    for field_name in SEARCH_FIELDS:
        quality = match_quality(getattr(context, field_name), query)
        if quality:
            weighted[field_name] = quality * FIELD_WEIGHTS[field_name]

    if not weighted:
        return 0.0, []

    score = max(weighted.values()) + EXTRA_FIELD_BONUS * (len(weighted) - 1)
    # 필드 순서를 SEARCH_FIELDS 순서로 유지합니다.
    matched_fields = [f for f in SEARCH_FIELDS if f in weighted]
    return float(min(MAX_SCORE, score)), matched_fields


def apply_filters(contexts: Iterable[ContextInfo], filters: SearchFilters) -> List[ContextInfo]:
    """점수와 무관한 필터들을 AND 조건으로 적용합니다. 원래 순서는 유지됩니다."""
    result = []
    for context in contexts:
        if filters.show_only_current and not context.current:
            continue
        if filters.show_only_with_namespace and not context.namespace:
            continue
        if filters.cluster and context.cluster != filters.cluster:
            continue
        if filters.namespace and context.namespace != filters.namespace:
            continue
        result.append(context)
    return result


def search_contexts(contexts: Iterable[ContextInfo], filters: Optional[SearchFilters] = None) -> List[SearchResult]:
    """
    컨텍스트 목록을 필터링하고 검색어와의 관련도 순으로 정렬한 결과를 반환합니다.

    처리 순서:
        1. 필터 적용 (현재 컨텍스트만, 네임스페이스 있는 것만, 클러스터/네임스페이스 완전 일치)
        2. 검색어가 있으면 필드별 점수 계산. 점수가 0인 컨텍스트는 결과에서 제외됩니다.
        3. 점수 내림차순, 동점이면 이름 오름차순 정렬

    검색어가 비어 있으면 남은 모든 컨텍스트가 같은 점수(100)를 받고 원래 순서를 유지합니다.

    Args:
        contexts: 검색 대상 컨텍스트 목록.
        filters: 검색 조건. 생략하면 모든 컨텍스트를 반환합니다.

    Returns:
        List[SearchResult]: 정렬된 검색 결과 목록.
    """
    filters = filters or SearchFilters()
    candidates = apply_filters(contexts, filters)
    query = normalize_query(filters.query)

    if not query:
        return [SearchResult(context=c, relevance_score=float(MAX_SCORE)) for c in candidates]

    results = []
    for context in candidates:
        score, matched_fields = score_context(context, query)
        if score > 0:
            results.append(SearchResult(context=context, relevance_score=score, matched_fields=matched_fields))

    results.sort(key=lambda r: (-r.relevance_score, r.context.name))
    return results


def highlight_matches(text: str, query: Optional[str], marker: str = DEFAULT_HIGHLIGHT_MARKER) -> str:
    """
    텍스트 안의 모든 검색어 등장 위치(대소문자 무시)를 강조 마커로 감쌉니다.
    원래 대소문자는 그대로 유지하며, 검색어가 비어 있으면 텍스트를 그대로 반환합니다.

    예: highlight_matches("prod-east", "PROD") -> "**prod**-east"
    """
    query = normalize_query(query)
    if not query or not text:
        return text
    pattern = re.compile(re.escape(query), re.IGNORECASE)
    return pattern.sub(lambda m: f"{marker}{m.group(0)}{marker}", text)


def get_filter_options(contexts: Iterable[ContextInfo]) -> FilterOptions:
    """컨텍스트 목록에 등장하는 클러스터와 네임스페이스를 중복 없이 정렬해 반환합니다."""
    clusters = set()
    namespaces = set()
    for context in contexts:
        if context.cluster:
            clusters.add(context.cluster)
        if context.namespace:
            namespaces.add(context.namespace)
    return FilterOptions(clusters=sorted(clusters), namespaces=sorted(namespaces))
