from pathlib import Path

import pytest
import yaml

K8S_DIR = Path(__file__).resolve().parents[1] / "k8s"


def _documents():
    docs = []
    for path in sorted(K8S_DIR.glob("*.yaml")):
        docs.extend(d for d in yaml.safe_load_all(path.read_text(encoding="utf-8")) if d)
    return docs


def _find(kind, name):
    for doc in _documents():
        if doc["kind"] == kind and doc["metadata"]["name"] == name:
            return doc
    raise AssertionError(f"{kind}/{name} not found")


def _container(deployment):
    return deployment["spec"]["template"]["spec"]["containers"][0]


def test_everything_lives_in_the_todo_namespace():
    for doc in _documents():
        if doc["kind"] == "Namespace":
            assert doc["metadata"]["name"] == "todo-app"
        else:
            assert doc["metadata"]["namespace"] == "todo-app"


@pytest.mark.parametrize("name,replicas", [
    ("backend-deployment", 2),
    ("frontend-deployment", 2),
    ("database-deployment", 1),
])
def test_replica_counts(name, replicas):
    assert _find("Deployment", name)["spec"]["replicas"] == replicas


def test_deployment_labels_match_selectors():
    for doc in _documents():
        if doc["kind"] != "Deployment":
            continue
        selector = doc["spec"]["selector"]["matchLabels"]
        assert doc["spec"]["template"]["metadata"]["labels"] == selector


def test_backend_probes_hit_list_endpoint():
    backend = _container(_find("Deployment", "backend-deployment"))

    liveness = backend["livenessProbe"]
    assert liveness["httpGet"] == {"path": "/api/todos", "port": 5000}
    assert (liveness["initialDelaySeconds"], liveness["periodSeconds"], liveness["failureThreshold"]) == (15, 10, 3)

    readiness = backend["readinessProbe"]
    assert readiness["httpGet"] == {"path": "/api/todos", "port": 5000}
    assert (readiness["initialDelaySeconds"], readiness["periodSeconds"], readiness["failureThreshold"]) == (5, 5, 3)


def test_backend_is_configured_from_configmap():
    backend = _container(_find("Deployment", "backend-deployment"))
    config = _find("ConfigMap", "todo-config")

    assert backend["envFrom"] == [{"configMapRef": {"name": "todo-config"}}]
    assert {"DATABASE_URL", "PORT"} <= set(config["data"])
    assert "database-service" in config["data"]["DATABASE_URL"]


def test_frontend_resources():
    resources = _container(_find("Deployment", "frontend-deployment"))["resources"]
    assert resources["requests"] == {"memory": "64Mi", "cpu": "50m"}
    assert resources["limits"] == {"memory": "128Mi", "cpu": "100m"}


def test_database_is_internal_and_ephemeral():
    service = _find("Service", "database-service")
    assert service["spec"]["type"] == "ClusterIP"

    pod = _find("Deployment", "database-deployment")["spec"]["template"]["spec"]
    assert pod["volumes"] == [{"name": "database-storage", "emptyDir": {}}]


@pytest.mark.parametrize("name,node_port", [
    ("backend-service", 30001),
    ("frontend-service", 30000),
])
def test_public_services_use_node_ports(name, node_port):
    spec = _find("Service", name)["spec"]
    assert spec["type"] == "NodePort"
    assert spec["ports"][0]["nodePort"] == node_port
