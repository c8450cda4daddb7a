# resources/contexts.py
# 이 파일은 kubeconfig 파일에서 사용 가능한 모든 컨텍스트 정보를
# 조회하는 MCP 리소스를 정의합니다.

from core.context import get_contexts  # kubeconfig를 컨텍스트 목록으로 변환합니다.
from mcp_tools.k8s_mcp_instance import mcp_instance as mcp  # 공유 MCP 서버 인스턴스를 가져옵니다.


@mcp.resource(uri="k8s://kube-contexts", name="Kube Contexts", description="사용 가능한 모든 kube 컨텍스트를 나열합니다.")
def list_kube_contexts():
    """
    사용자의 kubeconfig 파일에서 모든 Kubernetes 컨텍스트를 읽어와
    딕셔너리 리스트 형태로 반환합니다.

    Returns:
        List[dict]: 각 컨텍스트의 이름, 클러스터, 사용자, 네임스페이스 및
                    현재 활성화된 컨텍스트인지 여부. kubeconfig 파일이 없으면 빈 리스트.
    """
    return [ctx.to_dict() for ctx in get_contexts()]
