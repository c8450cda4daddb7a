# core/kubeconfig.py
# 이 파일은 kubeconfig 파일을 찾고, 읽고, 다시 쓰는 유틸리티 함수들을 포함합니다.
# 읽기 실패는 빈 문서로 대체하고, 쓰기 실패는 KubeconfigWriteError로 호출자에게 전달합니다.
#
# 주의: 쓰기는 임시 파일 + rename 방식이 아닌 전체 덮어쓰기입니다.
# 쓰기 도중 프로세스가 종료되면 파일이 손상될 수 있습니다.
# 여러 프로세스에서 동시에 쓰는 경우 호출자가 파일 경로 기준으로 상호 배제를 보장해야 합니다.

import logging  # 경고/오류 로그 기록을 위해 사용합니다.
import os  # 파일 존재 여부 및 권한 확인을 위해 사용합니다.
from typing import Any, Dict, List, Optional  # 타입 힌트를 위해 사용합니다.

import yaml  # YAML 파일 파싱/직렬화를 위해 사용합니다.

from core.errors import KubeconfigWriteError
from core.settings import resolve_kubeconfig_path
from models.context import KubeconfigInfo

logger = logging.getLogger(__name__)

# kubeconfig 최상위 키 이름
CURRENT_CONTEXT_KEY = "current-context"
CONTEXTS_KEY = "contexts"


def as_text(value: Any) -> Optional[str]:
    """
    YAML 스칼라 값을 문자열로 변환합니다. 따옴표 없이 쓴 숫자(namespace: 2024 등)도 문자열이 됩니다.
    None이나 빈 문자열은 None을 반환합니다.
    """
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    return text or None


def context_entries(config_data: Dict[str, Any]) -> List[Dict[str, Any]]:
    """문서의 contexts 항목 중 이름이 있는 올바른 항목만 문서 순서대로 반환합니다."""
    entries = config_data.get(CONTEXTS_KEY) or []
    if not isinstance(entries, list):
        return []
    return [e for e in entries if isinstance(e, dict) and as_text(e.get("name"))]


def get_kubeconfig_path() -> str:
    """
    사용할 kubeconfig 파일 경로를 반환합니다.
    KUBECONFIG 환경 변수가 기본 위치(~/.kube/config)보다 우선하며, 호출할 때마다 다시 확인합니다.
    """
    return resolve_kubeconfig_path()


def get_kubeconfig(path: Optional[str] = None) -> Dict[str, Any]:
    """
    kubeconfig 파일을 로드하여 파싱된 문서를 반환합니다.

    파일이 없거나 YAML 파싱에 실패한 경우 예외를 발생시키지 않고 빈 딕셔너리를 반환합니다.
    호출자는 빈 문서를 "알려진 컨텍스트 없음"으로 취급해야 합니다.

    Args:
        path (Optional[str]): 읽을 kubeconfig 경로. 생략하면 get_kubeconfig_path()를 사용합니다.

    Returns:
        Dict[str, Any]: 파싱된 kubeconfig 데이터. 알 수 없는 키도 그대로 포함됩니다.
    """
    kubeconfig_path = path or get_kubeconfig_path()

    if not os.path.exists(kubeconfig_path):
        logger.warning("Kubeconfig file not found: %s", kubeconfig_path)
        return {}

    try:
        with open(kubeconfig_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to read kubeconfig %s: %s", kubeconfig_path, e)
        return {}

    # 빈 파일(None)이나 매핑이 아닌 최상위 값은 빈 문서로 취급합니다.
    if not isinstance(config_data, dict):
        if config_data is not None:
            logger.warning("Kubeconfig %s is not a mapping, ignoring it", kubeconfig_path)
        return {}
    return config_data


def save_kubeconfig(config_data: Dict[str, Any], path: Optional[str] = None) -> None:
    """
    kubeconfig 문서를 YAML로 직렬화하여 파일 전체를 덮어씁니다.

    재시도나 부분 쓰기는 하지 않습니다. 키 순서는 문서의 순서를 그대로 유지합니다.

    Args:
        config_data (Dict[str, Any]): 저장할 kubeconfig 문서.
        path (Optional[str]): 쓸 경로. 생략하면 get_kubeconfig_path()를 사용합니다.

    Raises:
        KubeconfigWriteError: 직렬화 또는 파일 쓰기 중 오류가 발생한 경우.
    """
    kubeconfig_path = path or get_kubeconfig_path()

    try:
        content = yaml.safe_dump(config_data, default_flow_style=False, sort_keys=False, allow_unicode=True)
        with open(kubeconfig_path, "w", encoding="utf-8") as f:
            f.write(content)
    except (OSError, yaml.YAMLError) as e:
        logger.error("Failed to write kubeconfig %s: %s", kubeconfig_path, e)
        raise KubeconfigWriteError(kubeconfig_path, str(e)) from e


def is_kubeconfig_available(path: Optional[str] = None) -> bool:
    """kubeconfig 파일이 존재하고 읽을 수 있는지 확인합니다."""
    kubeconfig_path = path or get_kubeconfig_path()
    return os.path.isfile(kubeconfig_path) and os.access(kubeconfig_path, os.R_OK)


def get_kubeconfig_info(path: Optional[str] = None) -> KubeconfigInfo:
    """
    kubeconfig 파일의 경로, 사용 가능 여부, 컨텍스트 개수, 현재 컨텍스트 이름을 요약합니다.

    Returns:
        KubeconfigInfo: 파일 요약 정보. 파일을 읽을 수 없으면 개수 0, 현재 컨텍스트 None.
    """
    kubeconfig_path = path or get_kubeconfig_path()
    available = is_kubeconfig_available(kubeconfig_path)
    if not available:
        return KubeconfigInfo(path=kubeconfig_path, available=False)

    config_data = get_kubeconfig(kubeconfig_path)
    return KubeconfigInfo(
        path=kubeconfig_path,
        available=True,
        context_count=len(context_entries(config_data)),
        current_context=as_text(config_data.get(CURRENT_CONTEXT_KEY)),
    )
