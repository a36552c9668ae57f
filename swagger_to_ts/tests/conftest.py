from pathlib import Path

import pytest

from swagger_to_ts.model import (
    Array,
    GroupVersionKind,
    NamedProperty,
    Object,
    Primitive,
    PrimitiveKind,
    Ref,
)

CORE = "io.k8s.core.v1"
META = "io.k8s.apimachinery.meta.v1"
APPS = "io.k8s.api.apps.v1"

TEST_DATA = Path(__file__).parent / "test_data"


def string_property(name, required=False, description=""):
    return NamedProperty(name=name, type=Primitive(PrimitiveKind.STRING), required=required, description=description)


@pytest.fixture
def swagger_path():
    return TEST_DATA / "swagger.json"


@pytest.fixture
def pod():
    """Pod with a required metadata and an optional spec."""
    return Object(
        name="Pod",
        package=CORE,
        properties={
            "metadata": NamedProperty(name="metadata", type=Ref(META, "ObjectMeta"), required=True),
            "spec": NamedProperty(name="spec", type=Ref(CORE, "PodSpec")),
        },
        group_version_kinds=[GroupVersionKind(group="core", version="v1", kind="Pod")],
        is_kubernetes_object=True,
    )


@pytest.fixture
def deployment():
    """Deployment carrying its own apiVersion and kind fields."""
    return Object(
        name="Deployment",
        package=APPS,
        description="Deployment enables declarative updates for Pods.",
        properties={
            "apiVersion": string_property("apiVersion", required=True),
            "kind": string_property("kind", required=True),
            "metadata": NamedProperty(name="metadata", type=Ref(META, "ObjectMeta"), required=True),
            "pods": NamedProperty(name="pods", type=Array(Ref(CORE, "Pod"))),
        },
        group_version_kinds=[
            GroupVersionKind(group="apps", version="v1", kind="Deployment"),
            GroupVersionKind(group="extensions", version="v1beta1", kind="Deployment"),
        ],
        is_kubernetes_object=True,
    )
