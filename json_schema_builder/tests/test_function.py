from json_schema_builder import S, FunctionSchema, SchemaValidator


class TestFunctionSchema:
    def test_validates_functions(self):
        schema = FunctionSchema()
        assert schema.validate(lambda a, b: True)
        assert not schema.validate(123)
        assert not schema.validate({})

    def test_factory(self):
        schema = S.function()
        assert schema.node == {"type": "function"}
        assert schema.validate(len)
        assert schema.validate(lambda: 1)
        assert not schema.validate("not a function")

    def test_engine_understands_the_function_type(self):
        validator = SchemaValidator()
        schema = S.shape({"callback": S.function()})
        assert validator.is_valid(schema, {"callback": print})
        assert not validator.is_valid(schema, {"callback": "print"})
