# mcp_tools/mcp_server_k8s.py
# kube-context MCP 서버의 실행 진입점입니다.
# 리소스/도구 모듈을 임포트하여 공유 인스턴스에 등록한 뒤 stdio 전송 방식으로 서버를 실행합니다.
import importlib
import logging
import os
import sys

# 프로젝트 루트 경로 설정
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from core.settings import configure_logging, load_env_file, load_settings
# 생성된 공유 인스턴스를 가져옵니다.
from mcp_tools.k8s_mcp_instance import mcp_instance as mcp

logger = logging.getLogger("mcp_server_k8s")

MODULES_TO_LOAD = [
    "resources.contexts",
    "tools.context",
    "tools.namespace",
    "tools.search",
]


def load_modules():
    """리소스/도구 모듈을 임포트합니다. 임포트 시점에 데코레이터가 공유 인스턴스에 등록합니다."""
    for module_name in MODULES_TO_LOAD:
        importlib.import_module(module_name)
        logger.debug("Imported %s", module_name)
    logger.info("Loaded %d modules into MCP instance %s", len(MODULES_TO_LOAD), id(mcp))


def main():
    load_env_file()
    settings = load_settings()
    configure_logging(settings.log_level)

    load_modules()
    logger.info("Starting kube-context MCP server (stdio), kubeconfig: %s", settings.kubeconfig_path)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
