import pytest

from swagger_to_ts.backends import TypeScriptBackend
from swagger_to_ts.model import (
    Array,
    Empty,
    GroupVersionKind,
    Map,
    NamedProperty,
    Object,
    Primitive,
    PrimitiveKind,
    Ref,
    build_registry,
)

CORE = "io.k8s.core.v1"
KIND = Ref(CORE, "KubernetesObjectKind")
PLAIN = Ref(CORE, "PodSpec")


@pytest.fixture
def backend():
    kind = Object(
        name="KubernetesObjectKind",
        package=CORE,
        group_version_kinds=[GroupVersionKind("", "v1", "KubernetesObjectKind")],
        is_kubernetes_object=True,
    )
    spec = Object(name="PodSpec", package=CORE)
    return TypeScriptBackend(build_registry([kind, spec]))


class TestConstructorExpression:
    def test_primitives_pass_through(self, backend):
        assert backend.constructor_expression(CORE, Primitive(PrimitiveKind.STRING), "desc.a") == "desc.a"
        assert backend.constructor_expression(CORE, Empty(), "desc.a") == "desc.a"

    def test_kubernetes_object_ref_is_constructed(self, backend):
        assert backend.constructor_expression(CORE, KIND, "desc.a") == "new KubernetesObjectKind(desc.a)"

    def test_cross_package_ref_uses_alias(self, backend):
        assert backend.constructor_expression("io.k8s.api.apps.v1", KIND, "desc.a") == "new k8sCoreV1.KubernetesObjectKind(desc.a)"

    def test_plain_ref_passes_through(self, backend):
        assert backend.constructor_expression(CORE, PLAIN, "desc.spec") == "desc.spec"

    def test_array_of_objects_is_mapped(self, backend):
        expr = backend.constructor_expression(CORE, Array(KIND), "desc.items")
        assert expr == "desc.items.map((i) => new KubernetesObjectKind(i))"

    def test_nested_arrays_are_not_constructed(self, backend):
        assert backend.constructor_expression(CORE, Array(Array(KIND)), "desc.items") == "desc.items"

    def test_map_values_are_not_constructed(self, backend):
        assert backend.constructor_expression(CORE, Map(KIND), "desc.byName") == "desc.byName"

    def test_unknown_type_is_fatal(self, backend):
        with pytest.raises(AssertionError):
            backend.constructor_expression(CORE, None, "desc.a")


class TestConstructorLine:
    def test_required_array_of_objects(self, backend):
        prop = NamedProperty(name="items", type=Array(KIND), required=True)
        assert backend.constructor_line(CORE, prop) == "\nthis.items = desc.items.map((i) => new KubernetesObjectKind(i));"

    def test_optional_array_of_objects_is_guarded(self, backend):
        prop = NamedProperty(name="items", type=Array(KIND))
        assert backend.constructor_line(CORE, prop) == (
            "\nthis.items = (desc.items !== undefined) ? desc.items.map((i) => new KubernetesObjectKind(i)) : undefined;"
        )

    def test_optional_object_is_not_guarded(self, backend):
        prop = NamedProperty(name="child", type=KIND)
        assert backend.constructor_line(CORE, prop) == "\nthis.child = new KubernetesObjectKind(desc.child);"

    def test_override(self, backend):
        prop = NamedProperty(name="kind", type=Primitive(PrimitiveKind.STRING), required=True)
        assert backend.constructor_line(CORE, prop, "Pod.kind") == "\nthis.kind = Pod.kind;"

    def test_override_does_not_touch_property(self, backend):
        prop = NamedProperty(name="kind", type=Primitive(PrimitiveKind.STRING), required=True)
        backend.constructor_line(CORE, prop, "Pod.kind")
        assert backend.constructor_line(CORE, prop) == "\nthis.kind = desc.kind;"
