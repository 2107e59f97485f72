#!/usr/bin/env python3

import pytest

from json_schema_gen.pipeline import CodeGeneratorConfig
from json_schema_gen.pipeline.analyzer import GoType, NameResolver, TagEntry, TypeKind, TypeMapper
from json_schema_gen.pipeline.errors import UnsupportedSchemaConstructError


def ident(name):
    return GoType(kind=TypeKind.IDENT, ident=name)


class TestMapType:
    """Test cases for mapping property schemas to Go types"""

    @pytest.mark.parametrize(
        "name,schema,expected",
        [
            ("domain", {"type": "string"}, "string"),
            ("w", {"type": "integer"}, "int"),
            ("tmax", {"type": "positive_int"}, "int"),
            ("test", {"type": "boolean_int"}, "BoolInt"),
            ("coppa", {"type": "boolean"}, "bool"),
            ("lat", {"type": "number"}, "float64"),
            ("price", {"type": "number"}, "decimal.D"),
            ("bidfloor", {"type": "number"}, "decimal.D"),
            ("pxratio", {"type": "number"}, "decimal.D"),
            ("BidFloor", {"type": "number"}, "decimal.D"),
            ("ext", {"type": "object"}, "interface{}"),
            ("geo", {"type": "geo_info"}, "GeoInfo"),
            ("site", {"$ref": "#/definitions/site"}, "Site"),
            ("tmax", {"$ref": "#/definitions/positive_int"}, "int"),
            ("test", {"$ref": "#/definitions/boolean_int"}, "BoolInt"),
        ],
    )
    def test_ident_types(self, mapper, parse, name, schema, expected):
        assert mapper.map_type(name, parse(schema)) == ident(expected)

    def test_array_of_primitives(self, mapper, parse):
        go_type = mapper.map_type("cat", parse({"type": "array", "items": {"type": "string"}}))
        assert go_type == GoType(kind=TypeKind.ARRAY, ident="string")

    def test_array_of_refs(self, mapper, parse):
        go_type = mapper.map_type("imp", parse({"type": "array", "items": {"$ref": "#/definitions/imp"}}))
        assert go_type == GoType(kind=TypeKind.ARRAY, ident="Imp")

    def test_array_of_prices_uses_decimal(self, mapper, parse):
        go_type = mapper.map_type("prices", parse({"type": "array", "items": {"type": "number"}}))
        assert go_type.ident == "decimal.D"

    @pytest.mark.parametrize(
        "schema",
        [
            {"type": "array", "items": {"type": "array", "items": {"type": "string"}}},
            {"type": "array"},
            {"$ref": "http://example.com/other.json#/definitions/site"},
            {"$ref": "#/properties/site"},
            {"type": "null"},
            {"type": ["string", "null"]},
            {"type": "object", "properties": {"id": {"type": "string"}}},
            {"enum": ["a", "b"]},
            {},
        ],
    )
    def test_unsupported_constructs(self, mapper, parse, schema):
        with pytest.raises(UnsupportedSchemaConstructError):
            mapper.map_type("field", parse(schema))

    def test_custom_identifiers(self, parse):
        config = CodeGeneratorConfig(decimal_ident="Decimal", bool_int_ident="Flag", any_ident="any")
        mapper = TypeMapper(NameResolver(), config)

        assert mapper.map_type("price", parse({"type": "number"})).ident == "Decimal"
        assert mapper.map_type("test", parse({"type": "boolean_int"})).ident == "Flag"
        assert mapper.map_type("ext", parse({"type": "object"})).ident == "any"


class TestMapSchema:
    """Test cases for building declarations from schema documents"""

    def test_bid_scenario(self, mapper, parse):
        schema = parse(
            {
                "id": "bid",
                "properties": {"id": {"type": "string"}, "price": {"type": "number"}},
                "definitions": {},
            }
        )

        [decl] = mapper.map_schema(schema.id, schema)

        assert decl.name == "Bid"
        assert decl.type.kind == TypeKind.STRUCT
        id_field, price_field = decl.type.fields
        assert id_field.name == "ID"
        assert id_field.type == ident("string")
        assert id_field.tag == (
            TagEntry(encoding="json", name="id", omit_empty=True),
            TagEntry(encoding="yaml", name="id", omit_empty=True),
        )
        assert price_field.name == "Price"
        assert price_field.type == ident("decimal.D")
        assert all(not entry.omit_empty for entry in price_field.tag)

    def test_fields_sorted_by_go_name(self, mapper, parse):
        schema = parse({"properties": {"w": {"type": "integer"}, "h": {"type": "integer"}, "btype": {"type": "string"}}})

        [decl] = mapper.map_schema("banner", schema)

        assert [f.name for f in decl.type.fields] == ["Btype", "H", "W"]

    def test_floor_keeps_omitempty(self, mapper, parse):
        schema = parse({"properties": {"bidfloor": {"type": "number"}}})

        [decl] = mapper.map_schema("imp", schema)

        assert decl.type.fields[0].type == ident("decimal.D")
        assert all(entry.omit_empty for entry in decl.type.fields[0].tag)

    def test_price_reference_keeps_omitempty(self, mapper, parse):
        schema = parse({"properties": {"price_info": {"$ref": "#/definitions/price_info"}}})

        [decl] = mapper.map_schema("deal", schema)

        assert all(entry.omit_empty for entry in decl.type.fields[0].tag)

    def test_mixed_case_price_keeps_zero_values(self, mapper, parse):
        schema = parse({"properties": {"BidPrice": {"type": "number"}}})

        [decl] = mapper.map_schema("bid", schema)

        assert decl.type.fields[0].name == "BidPrice"
        assert decl.type.fields[0].type == ident("decimal.D")
        assert all(not entry.omit_empty for entry in decl.type.fields[0].tag)

    def test_definitions_follow_their_parent(self, mapper, parse):
        schema = parse(
            {
                "id": "request",
                "properties": {"site": {"$ref": "#/definitions/site"}},
                "definitions": {
                    "site": {
                        "properties": {"publisher": {"$ref": "#/definitions/publisher"}},
                        "definitions": {"publisher": {"properties": {"id": {"type": "string"}}}},
                    },
                    "positive_int": {"type": "integer", "minimum": 1},
                },
            }
        )

        decls = mapper.map_schema(schema.id, schema)

        assert [d.name for d in decls] == ["Request", "Site", "Publisher", "PositiveInt"]
        assert decls[0].type.fields[0].type == ident("Site")
        assert decls[3].type == ident("int")

    def test_alias_declarations(self, mapper, parse):
        schema = parse(
            {
                "properties": {"id": {"type": "string"}},
                "definitions": {
                    "no_bid_reason": {"type": "integer", "enum": [0, 1, 2]},
                    "categories": {"type": "array", "items": {"type": "string"}},
                    "content_category": {"$ref": "#/definitions/category"},
                    "ext": {"type": "object"},
                }
            }
        )

        decls = {d.name: d.type for d in mapper.map_schema("openrtb", schema)}

        del decls["Openrtb"]
        assert decls == {
            "NoBidReason": ident("int"),
            "Categories": GoType(kind=TypeKind.ARRAY, ident="string"),
            "ContentCategory": ident("Category"),
            "Ext": ident("interface{}"),
        }

    def test_definitions_only_document_is_unsupported(self, mapper, parse):
        schema = parse({"id": "openrtb", "definitions": {"site": {"properties": {"id": {"type": "string"}}}}})

        with pytest.raises(UnsupportedSchemaConstructError, match=r"no properties, type or \$ref"):
            mapper.map_schema(schema.id, schema)

    def test_missing_id_is_unsupported(self, mapper, parse):
        with pytest.raises(UnsupportedSchemaConstructError, match="no id"):
            mapper.map_schema("", parse({"properties": {"id": {"type": "string"}}}))

    def test_colliding_field_names_are_unsupported(self, mapper, parse):
        schema = parse({"properties": {"site_id": {"type": "string"}, "siteId": {"type": "string"}}})

        with pytest.raises(UnsupportedSchemaConstructError, match="SiteID"):
            mapper.map_schema("imp", schema)

    def test_empty_schema_is_unsupported(self, mapper, parse):
        with pytest.raises(UnsupportedSchemaConstructError):
            mapper.map_schema("nothing", parse({"description": "no shape"}))

    def test_external_ref_fails_whole_document(self, mapper, parse):
        schema = parse(
            {
                "id": "native",
                "properties": {
                    "ver": {"type": "string"},
                    "assets": {"$ref": "http://example.com/native.json#/definitions/asset"},
                },
            }
        )

        with pytest.raises(UnsupportedSchemaConstructError, match="#/properties/assets"):
            mapper.map_schema(schema.id, schema)

    def test_error_inside_definition_propagates(self, mapper, parse):
        schema = parse(
            {
                "properties": {"id": {"type": "string"}},
                "definitions": {"bad": {"properties": {"x": {"type": "null"}}}},
            }
        )

        with pytest.raises(UnsupportedSchemaConstructError):
            mapper.map_schema("doc", schema)

    def test_mapping_is_idempotent(self, mapper, parse):
        document = {
            "id": "bid",
            "properties": {"id": {"type": "string"}, "price": {"type": "number"}},
            "definitions": {"ext": {"properties": {"x": {"type": "integer"}}}},
        }

        assert mapper.map_schema("bid", parse(document)) == mapper.map_schema("bid", parse(document))

    def test_name_overrides_apply_to_fields_and_types(self, parse):
        mapper = TypeMapper(NameResolver({"bidfloor": "bid_floor", "imp": "impression"}))
        schema = parse({"properties": {"bidfloor": {"type": "number"}, "imp": {"$ref": "#/definitions/imp"}}})

        [decl] = mapper.map_schema("imp", schema)

        assert decl.name == "Impression"
        assert [(f.name, f.type.ident) for f in decl.type.fields] == [("BidFloor", "decimal.D"), ("Impression", "Impression")]
        # Tags keep the raw property name
        assert decl.type.fields[0].tag[0].name == "bidfloor"

    def test_encodings_are_configurable(self, parse):
        mapper = TypeMapper(NameResolver(), CodeGeneratorConfig(encodings=["json"]))

        [decl] = mapper.map_schema("site", parse({"properties": {"id": {"type": "string"}}}))

        assert decl.type.fields[0].tag == (TagEntry(encoding="json", name="id", omit_empty=True),)
