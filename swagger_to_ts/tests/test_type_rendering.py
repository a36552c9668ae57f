import pytest

from swagger_to_ts.backends import print_class_field, print_interface_field, render_type
from swagger_to_ts.model import Array, Empty, Map, NamedProperty, Primitive, PrimitiveKind, Ref

CURRENT = "io.k8s.api.core.v1"


class TestRenderType:
    @pytest.mark.parametrize(
        "t,expected",
        [
            (Empty(), "object"),
            (Primitive(PrimitiveKind.BOOLEAN), "boolean"),
            (Primitive(PrimitiveKind.INTEGER), "number"),
            (Primitive(PrimitiveKind.NUMBER), "number"),
            (Primitive(PrimitiveKind.STRING), "string"),
            (Ref(CURRENT, "PodSpec"), "PodSpec"),
            (Ref("io.k8s.apimachinery.pkg.apis.meta.v1", "ObjectMeta"), "apisMetaV1.ObjectMeta"),
            (Array(Primitive(PrimitiveKind.STRING)), "string[]"),
            (Array(Array(Ref(CURRENT, "Container"))), "Container[][]"),
            (Map(Primitive(PrimitiveKind.STRING)), "{[key: string]: string}"),
            (Map(Array(Empty())), "{[key: string]: object[]}"),
        ],
    )
    def test_render(self, t, expected):
        assert render_type(CURRENT, t) == expected

    def test_unknown_type_is_fatal(self):
        with pytest.raises(AssertionError):
            render_type(CURRENT, "string")


class TestFields:
    def test_required_class_field(self):
        prop = NamedProperty(name="name", type=Primitive(PrimitiveKind.STRING), required=True)
        assert print_class_field(CURRENT, prop) == "public name: string;"

    def test_optional_class_field_with_description(self):
        prop = NamedProperty(
            name="replicas",
            type=Primitive(PrimitiveKind.INTEGER),
            description="Number of desired pods.\nDefaults to 1.",
        )
        assert print_class_field(CURRENT, prop) == "// Number of desired pods.\n// Defaults to 1.\npublic replicas?: number;"

    def test_interface_field_has_no_modifier(self):
        prop = NamedProperty(name="labels", type=Map(Primitive(PrimitiveKind.STRING)))
        assert print_interface_field(CURRENT, prop) == "labels?: {[key: string]: string};"
