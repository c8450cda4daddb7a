# core/errors.py
# 컨텍스트 저장소에서 발생하는 예외 클래스들을 정의합니다.
# 읽기 경로는 빈 문서로 대체되므로 예외가 없고, 쓰기 경로와 조회 실패만 예외로 전달됩니다.


class KubeContextError(Exception):
    """컨텍스트 관리 코어에서 발생하는 모든 예외의 기본 클래스입니다."""


class ContextNotFoundError(KubeContextError):
    """
    요청한 이름의 컨텍스트가 kubeconfig에 존재하지 않을 때 발생합니다.

    Attributes:
        context_name (str): 찾지 못한 컨텍스트 이름.
    """

    def __init__(self, context_name: str):
        self.context_name = context_name
        super().__init__(f'Context "{context_name}" not found')


class KubeconfigWriteError(KubeContextError):
    """kubeconfig 파일 쓰기(직렬화 포함)에 실패했을 때 발생합니다."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Failed to write kubeconfig {path}: {reason}")


class RecentStoreError(KubeContextError):
    """최근 컨텍스트 상태 저장소에 쓰기를 실패했을 때 발생합니다."""
