from api_example_synth.schema.composition import is_composite, normalize_composition


class TestNormalizeComposition:
    def test_each_member_resolved_independently(self):
        seen = []

        def resolve(member):
            seen.append(member)
            return {"resolved": member["$ref"]}

        node = {"oneOf": [{"$ref": "#/a"}, {"$ref": "#/b"}], "description": "either"}
        result = normalize_composition(node, resolve)

        assert result["oneOf"] == [{"resolved": "#/a"}, {"resolved": "#/b"}]
        assert result["description"] == "either"
        assert len(seen) == 2

    def test_all_of_members_are_not_merged(self):
        node = {
            "allOf": [
                {"type": "object", "properties": {"id": {"type": "integer"}}},
                {"type": "object", "properties": {"name": {"type": "string"}}},
            ]
        }
        result = normalize_composition(node, lambda member: member)
        assert len(result["allOf"]) == 2
        assert "properties" not in result

    def test_input_not_mutated(self):
        members = [{"$ref": "#/a"}]
        node = {"anyOf": members}
        normalize_composition(node, lambda member: {"type": "string"})
        assert node["anyOf"] is members
        assert members == [{"$ref": "#/a"}]

    def test_non_list_keyword_left_alone(self):
        node = {"allOf": "broken"}
        assert normalize_composition(node, lambda member: None) == {"allOf": "broken"}


class TestIsComposite:
    def test_detects_keywords(self):
        assert is_composite({"allOf": []})
        assert is_composite({"anyOf": [{}]})
        assert not is_composite({"type": "object"})
        assert not is_composite({"oneOf": "x"})
