from api_example_synth.parser.base import ApiEndpoint, Param, RequestBodyDescriptor


class TestParam:
    def test_create_required_param(self):
        p = Param(name="id", location="path", required=True, param_type="integer")
        assert p.name == "id"
        assert p.required is True
        assert p.description == ""
        assert p.constraints == {}
        assert p.example is None


class TestRequestBodyDescriptor:
    def test_defaults(self):
        d = RequestBodyDescriptor(content_type="application/json")
        assert d.required is False
        assert d.body_schema is None
        assert d.example_text == "null"

    def test_serialized_names(self):
        d = RequestBodyDescriptor(
            content_type="application/json",
            body_schema={"type": "boolean"},
            example=False,
        )
        data = d.model_dump(by_alias=True)
        assert data["contentType"] == "application/json"
        assert data["schema"] == {"type": "boolean"}
        assert data["example_text"] == "false"


class TestApiEndpoint:
    def test_create_post_endpoint_with_body(self):
        ep = ApiEndpoint(
            method="POST",
            path="/api/users",
            summary="Create user",
            parameters=[],
            request_body=RequestBodyDescriptor(
                content_type="application/json",
                example={"name": "Example Name"},
            ),
            responses={"201": {"description": "Created"}},
            auth_required=True,
            tags=["users"],
        )
        assert ep.request_body.example == {"name": "Example Name"}
        assert ep.operation_id == ""

    def test_endpoint_serialization_roundtrip(self):
        ep = ApiEndpoint(
            method="DELETE",
            path="/api/users/{id}",
            summary="Delete user",
            parameters=[
                Param(name="id", location="path", required=True, param_type="integer")
            ],
            request_body=None,
            responses={"204": {"description": "Deleted"}},
            auth_required=True,
            tags=["users"],
        )
        data = ep.model_dump()
        ep2 = ApiEndpoint(**data)
        assert ep2.path == "/api/users/{id}"
        assert len(ep2.parameters) == 1
