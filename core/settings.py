# core/settings.py
# 환경 변수(.env 포함)에서 설정 값을 읽어 Settings 객체로 만들고,
# 로깅 설정을 담당하는 유틸리티를 포함합니다.

import logging  # 로깅 설정을 위해 사용합니다.
import os  # 환경 변수 접근 및 경로 조작을 위해 사용합니다.
import sys  # 로그를 stderr로 보내기 위해 사용합니다.
from dataclasses import dataclass  # 설정 데이터 클래스 생성을 위해 사용합니다.
from typing import Optional  # 타입 힌트를 위해 사용합니다.

from dotenv import load_dotenv  # .env 파일 로드를 위해 사용합니다.

# 기본 kubeconfig 위치 (~/.kube/config)
DEFAULT_KUBECONFIG = os.path.join("~", ".kube", "config")
# 최근 컨텍스트 목록을 보관하는 상태 파일의 기본 위치
DEFAULT_STATE_FILE = os.path.join("~", ".kube-context", "state.json")
DEFAULT_RECENT_MAX = 5
DEFAULT_HIGHLIGHT_MARKER = "**"

# 프로젝트 루트의 .env 파일 경로
DOTENV_PATH = os.path.join(os.path.dirname(__file__), "..", ".env")


@dataclass
class Settings:
    """
    서버와 코어 모듈이 공유하는 설정 값입니다.

    Attributes:
        kubeconfig_path (str): 사용할 kubeconfig 파일 경로 (확장된 절대 경로).
        state_file (str): 최근 컨텍스트 상태 파일 경로.
        recent_max (int): 최근 컨텍스트 목록의 최대 길이.
        log_level (str): 로그 레벨 이름.
        highlight_marker (str): 검색어 강조에 사용할 마커 문자열.
    """
    kubeconfig_path: str
    state_file: str
    recent_max: int = DEFAULT_RECENT_MAX
    log_level: str = "INFO"
    highlight_marker: str = DEFAULT_HIGHLIGHT_MARKER


def load_env_file(dotenv_path: Optional[str] = None) -> bool:
    """.env 파일이 있으면 환경 변수로 로드합니다. 이미 설정된 환경 변수는 덮어쓰지 않습니다."""
    return load_dotenv(dotenv_path=dotenv_path or DOTENV_PATH)


def resolve_kubeconfig_path() -> str:
    """
    현재 환경에서 사용할 kubeconfig 경로를 반환합니다.

    KUBECONFIG 환경 변수가 설정되어 있으면 그 값을 우선 사용하고,
    없으면 ~/.kube/config를 사용합니다. 여러 파일을 병합하는 기능은 지원하지 않으므로
    경로 구분자로 여러 경로가 주어진 경우 첫 번째 경로만 사용합니다.

    Returns:
        str: 사용자 홈(~)이 확장된 kubeconfig 파일 경로.
    """
    env_value = os.getenv("KUBECONFIG", "")
    # 빈 항목은 건너뛰고 첫 번째 경로만 사용합니다.
    candidates = [p for p in env_value.split(os.pathsep) if p.strip()]
    path = candidates[0].strip() if candidates else DEFAULT_KUBECONFIG
    return os.path.expanduser(path)


def load_settings() -> Settings:
    """
    환경 변수에서 설정을 읽어옵니다. 우선순위: 환경 변수 > 기본값.

    Returns:
        Settings: 현재 환경 기준의 설정 객체.
    """
    recent_max = int(os.getenv("KUBE_CONTEXT_RECENT_MAX", DEFAULT_RECENT_MAX))
    if recent_max < 1:
        raise ValueError(f"KUBE_CONTEXT_RECENT_MAX must be positive, got {recent_max}")

    return Settings(
        kubeconfig_path=resolve_kubeconfig_path(),
        state_file=os.path.expanduser(os.getenv("KUBE_CONTEXT_STATE_FILE", DEFAULT_STATE_FILE)),
        recent_max=recent_max,
        log_level=os.getenv("KUBE_CONTEXT_LOG_LEVEL", "INFO").upper(),
        highlight_marker=os.getenv("KUBE_CONTEXT_HIGHLIGHT_MARKER", DEFAULT_HIGHLIGHT_MARKER),
    )


def configure_logging(level: str = "INFO") -> None:
    """
    루트 로거를 stderr 핸들러로 설정합니다.
    stdio 전송 방식에서는 stdout이 MCP 프로토콜 전용이므로 로그는 반드시 stderr로 보냅니다.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
