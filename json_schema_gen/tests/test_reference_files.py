from pathlib import Path

import pytest

from json_schema_gen.pipeline import CodeGeneratorConfig, PipelineGenerator, UnsupportedSchemaConstructError

from .conftest import SCHEMAS, TEST_DATA

OPENRTB_SCHEMAS = [SCHEMAS / "bid_request.json", SCHEMAS / "bid_response.json"]


def generate(paths, **config):
    config.setdefault("add_generation_comment", False)
    return PipelineGenerator(CodeGeneratorConfig(**config)).generate(paths)


def test_openrtb_reference():
    code = generate(OPENRTB_SCHEMAS)

    out = Path(__file__).parent / "schemas_out"
    out.mkdir(exist_ok=True)
    with open(out / "openrtb.go", "w") as f:
        f.write(code)

    with open(TEST_DATA / "openrtb.go") as f:
        ref = f.read()
    assert code == ref


def test_file_order_does_not_change_output():
    assert generate(OPENRTB_SCHEMAS) == generate(list(reversed(OPENRTB_SCHEMAS)))


def test_generation_is_repeatable():
    generator = PipelineGenerator(CodeGeneratorConfig(add_generation_comment=False))
    assert generator.generate(OPENRTB_SCHEMAS) == generator.generate(OPENRTB_SCHEMAS)


def test_shared_definitions_are_declared_once():
    code_file = PipelineGenerator().build(OPENRTB_SCHEMAS)
    names = [decl.name for decl in code_file.type_decls]

    assert len(names) == len(set(names))
    assert "BooleanInt" not in names
    assert "PositiveInt" not in names
    assert names == sorted(names)
    assert code_file.package_name == "openrtb"
    assert code_file.imports == ["h12.io/decimal"]


def test_collect_decls_keeps_pre_order():
    decls = PipelineGenerator().collect_decls(SCHEMAS / "bid_response.json")

    assert [d.name for d in decls] == ["BidResponse", "BooleanInt", "NoBidReason", "SeatBid", "Bid"]


def test_name_map_renames_fields():
    generator = PipelineGenerator(CodeGeneratorConfig(add_generation_comment=False), {"bidfloor": "bid_floor"})

    code = generator.generate([SCHEMAS / "bid_request.json"])

    assert 'BidFloor    decimal.D `json:"bidfloor,omitempty" yaml:"bidfloor,omitempty"`' in code


def test_external_ref_aborts_run():
    with pytest.raises(UnsupportedSchemaConstructError):
        generate([SCHEMAS / "bid_request.json", SCHEMAS / "external_ref.json"])


def test_package_and_imports_are_configurable():
    code = generate([SCHEMAS / "bid_response.json"], package_name="rtb", imports=["github.com/shopspring/decimal"])

    assert code.startswith('package rtb\n\nimport (\n\t"github.com/shopspring/decimal"\n)\n')
