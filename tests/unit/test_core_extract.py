"""Tests for default-export name extraction."""
from autoglobal.core import extract_default_name, strip_comments


class TestCommentStripping:
    def test_line_and_block_comments(self):
        src = "a // one\n/* two\nthree */b"
        assert strip_comments(src) == "a \nb"

    def test_block_comment_is_non_greedy(self):
        assert strip_comments("/* x */keep/* y */") == "keep"


class TestDefaultExportExtraction:
    def test_default_export_function(self):
        assert extract_default_name("export default function Foo() {}") == "Foo"

    def test_default_export_class(self):
        assert extract_default_name("export default class Bar extends Base {}") == "Bar"

    def test_default_export_variable(self):
        src = "const Button = () => null;\nexport default Button;"
        assert extract_default_name(src) == "Button"

    def test_dollar_and_underscore_names(self):
        assert extract_default_name("export default $store") == "$store"
        assert extract_default_name("export default _helpers;") == "_helpers"

    def test_numeric_export_has_no_name(self):
        assert extract_default_name("export default 42;") is None

    def test_anonymous_function_has_no_name(self):
        assert extract_default_name("export default function () {}") is None
        assert extract_default_name("export default function(a) { return a }") is None

    def test_arrow_and_object_exports_skipped(self):
        assert extract_default_name("export default () => 1;") is None
        assert extract_default_name("export default { a: 1 };") is None

    def test_commented_out_export_ignored(self):
        src = "// export default Old\n/* export default Older */\nexport default New;"
        assert extract_default_name(src) == "New"

    def test_first_match_wins(self):
        src = "export default First;\nexport default Second;"
        assert extract_default_name(src) == "First"

    def test_no_export(self):
        assert extract_default_name("export const a = 1;") is None
        assert extract_default_name("") is None

    def test_multiline_whitespace(self):
        assert extract_default_name("export\n  default\n\tclass\n  Widget {}") == "Widget"
