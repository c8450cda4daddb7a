# mcp_tools/k8s_mcp_instance.py
# 리소스/도구 모듈들이 함께 등록할 공유 MCP 인스턴스를 생성합니다.
import logging

from mcp.server.fastmcp import FastMCP

logger = logging.getLogger(__name__)

# 공유 MCP 인스턴스를 여기서 생성합니다.
mcp_instance = FastMCP(
    "kube-context",
    instructions="kubeconfig의 컨텍스트를 조회, 검색, 전환하고 컨텍스트별 네임스페이스를 지정하는 도구입니다.",
)
logger.debug("Shared MCP instance created with ID: %s", id(mcp_instance))
