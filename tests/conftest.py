# tests/conftest.py
# 테스트용 kubeconfig 파일과 환경 변수를 준비하는 공용 fixture들입니다.

import copy

import pytest
import yaml

SAMPLE_KUBECONFIG = {
    "apiVersion": "v1",
    "kind": "Config",
    "preferences": {"colors": True},
    "current-context": "dev",
    "clusters": [
        {"name": "dev-cluster", "cluster": {"server": "https://dev.example.com:6443", "insecure-skip-tls-verify": True}},
        {"name": "prod-cluster", "cluster": {"server": "https://prod.example.com", "certificate-authority-data": "QUJD"}},
        {"name": "staging-cluster", "cluster": {"server": "https://staging.example.com"}},
    ],
    "users": [
        {"name": "dev-user", "user": {"token": "abc123"}},
        {"name": "prod-admin", "user": {"exec": {"command": "aws", "args": ["eks", "get-token"]}}},
    ],
    "contexts": [
        {"name": "dev", "context": {"cluster": "dev-cluster", "user": "dev-user", "namespace": "team-a"}},
        {"name": "prod", "context": {"cluster": "prod-cluster", "user": "prod-admin"}},
        {"name": "staging", "context": {"cluster": "staging-cluster", "user": "dev-user", "namespace": "qa"}},
    ],
    "x-custom-extension": {"owner": "platform", "tags": ["a", "b"]},
}


def write_kubeconfig(path, data):
    path.write_text(yaml.safe_dump(data, sort_keys=False))
    return path


def read_kubeconfig(path):
    return yaml.safe_load(path.read_text())


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """모든 테스트에서 실제 ~/.kube/config와 상태 파일을 건드리지 않도록 환경을 격리합니다."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("KUBE_CONTEXT_STATE_FILE", str(tmp_path / "state" / "state.json"))
    for key in ["KUBECONFIG", "KUBE_CONTEXT_RECENT_MAX", "KUBE_CONTEXT_LOG_LEVEL", "KUBE_CONTEXT_HIGHLIGHT_MARKER"]:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def sample_config():
    return copy.deepcopy(SAMPLE_KUBECONFIG)


@pytest.fixture
def kubeconfig_path(tmp_path, monkeypatch, sample_config):
    """샘플 kubeconfig를 임시 파일로 쓰고 KUBECONFIG 환경 변수로 지정합니다."""
    path = write_kubeconfig(tmp_path / "config", sample_config)
    monkeypatch.setenv("KUBECONFIG", str(path))
    return path
