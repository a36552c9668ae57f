from swagger_to_ts.backends import TypeScriptBackend
from swagger_to_ts.config import TypeGenConfig
from swagger_to_ts.model import (
    Alias,
    Array,
    GroupVersionKind,
    NamedProperty,
    Object,
    Primitive,
    PrimitiveKind,
    Ref,
    build_registry,
)


def referencing(package, *refs):
    return Object(
        name="Holder",
        package=package,
        properties={f"p{i}": NamedProperty(name=f"p{i}", type=ref) for i, ref in enumerate(refs)},
    )


class TestPrintHeader:
    def test_empty_batch(self):
        assert TypeScriptBackend({}).print_header([]) == ""

    def test_no_imports(self):
        alias = Alias(name="Quantity", package="a.b.c", type=Primitive(PrimitiveKind.STRING))
        assert TypeScriptBackend({}).print_header([alias]) == ""

    def test_packages_deduplicated_and_current_package_excluded(self):
        alias = Alias(name="A", package="a.b.c", type=Array(Ref("x.y.z", "X")))
        holder = referencing("a.b.c", Ref("a.b.c", "A"), Ref("x.y.z", "Y"))
        assert TypeScriptBackend({}).print_header([alias, holder]) == "import * as xYZ from './x.y.z';"

    def test_packages_sorted(self):
        holder = referencing(
            "io.k8s.api.core.v1",
            Ref("io.k8s.apimachinery.pkg.apis.meta.v1", "ObjectMeta"),
            Ref("io.k8s.apimachinery.pkg.api.resource", "Quantity"),
        )
        assert TypeScriptBackend({}).print_header([holder]) == (
            "import * as pkgApiResource from './io.k8s.apimachinery.pkg.api.resource';\n"
            "import * as apisMetaV1 from './io.k8s.apimachinery.pkg.apis.meta.v1';"
        )

    def test_kubernetes_object_import(self, pod):
        backend = TypeScriptBackend(build_registry([pod]))
        assert backend.print_header([pod]) == (
            "import { KubernetesObject } from '@googlecontainertools/kpt-functions';\n"
            "import * as apimachineryMetaV1 from './io.k8s.apimachinery.meta.v1';"
        )

    def test_kubernetes_object_import_needs_registry(self, pod):
        """Identity comes from the registry, not from the batch alone."""
        assert "KubernetesObject" not in TypeScriptBackend({}).print_header([pod])

    def test_referencing_a_kubernetes_object_is_not_enough(self, pod):
        holder = referencing("a.b.c", Ref(pod.package, pod.name))
        backend = TypeScriptBackend(build_registry([pod, holder]))
        assert backend.print_header([holder]) == "import * as k8sCoreV1 from './io.k8s.core.v1';"

    def test_custom_kubernetes_object_module(self):
        obj = Object(
            name="Widget",
            package="dev.example.widgets",
            group_version_kinds=[GroupVersionKind("example.dev", "v1", "Widget")],
            is_kubernetes_object=True,
        )
        config = TypeGenConfig(kubernetes_object_module="kpt-functions")
        backend = TypeScriptBackend(build_registry([obj]), config)
        assert backend.print_header([obj]) == "import { KubernetesObject } from 'kpt-functions';"


class TestPrintFile:
    def test_sections_separated_by_blank_lines(self):
        first = Alias(name="A", package="a.b.c", type=Ref("x.y.z", "X"))
        second = Alias(name="B", package="a.b.c", type=Primitive(PrimitiveKind.BOOLEAN))
        assert TypeScriptBackend({}).print_file([first, second]) == (
            "import * as xYZ from './x.y.z';\n\nexport type A = xYZ.X;\n\nexport type B = boolean;\n"
        )

    def test_generation_comment(self):
        alias = Alias(name="A", package="a.b.c", type=Primitive(PrimitiveKind.STRING))
        assert TypeScriptBackend({}).print_file([alias], "// Generated") == "// Generated\n\nexport type A = string;\n"

    def test_file_name(self, pod):
        assert TypeScriptBackend({}).file_name(pod) == "io.k8s.core.v1.ts"
