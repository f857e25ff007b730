import unittest
from concurrent.futures import ThreadPoolExecutor

from justminify import MinifyOptions, emit_error, minify, minify_with_errors

OPTION_MATRIX = [
    MinifyOptions(),
    MinifyOptions(collapse_whitespace=False),
    MinifyOptions(trim_attr_whitespace=False),
    MinifyOptions(collapse_whitespace=False, trim_attr_whitespace=False, remove_comments=False),
    MinifyOptions(remove_empty_attributes=True, boolean_attr_shortening=True),
    MinifyOptions(remove_default_type=False, keep_markers=["keep-me"]),
]

CORPUS = [
    "<!DOCTYPE html>\n<html>\n  <head>\n    <title> Page </title>\n  </head>\n</html>",
    '<div class="a" >\n  <span>a</span> <span>b</span>\n</div>',
    "<p>\n  Some   <em>inline</em>  <b>text</b>\n</p>\n<!-- note -->",
    '<img src=a.png> <input disabled="" value="" checked="checked"><br />',
    "<pre>A  B\n\nC</pre>\n<textarea>  x  </textarea>",
    '<script type="text/javascript">\n  var a  =  1;\n</script>\n<style> p { } </style>',
    "<!--[if IE]><p>old</p><![endif]-->\n<!-- keep-me: license -->\n<p>x</p>",
    "<p>a\u00a0\u00a0b</p>\n<p>  c  </p>",
    "a < b and <3\n<div   class='broken",
    "<p>x</p>\n<script>never closed",
    "<a href=/x/>link</a> <a href=y>z</a>",
    "<ul>\n  <li>one</li>\n  <li>two</li>\n</ul>",
]


class TestMinify(unittest.TestCase):
    def test_preserve_fidelity_for_every_option_set(self) -> None:
        text = '<div>\n  <pre class = " x ">A  B\n\nC</pre>\n</div>'
        for opts in OPTION_MATRIX:
            with self.subTest(opts=opts):
                out = minify(text, opts)
                self.assertIn('<pre class = " x ">A  B\n\nC</pre>', out)

    def test_idempotent(self) -> None:
        for opts in OPTION_MATRIX:
            for text in CORPUS:
                with self.subTest(opts=opts, text=text):
                    once = minify(text, opts)
                    self.assertEqual(minify(once, opts), once)

    def test_void_tags(self) -> None:
        self.assertIn('<img src="a.png"/>', minify('<img src="a.png">'))
        self.assertIn('<div class="a">', minify('<div class="a" >'))

    def test_inline_adjacency(self) -> None:
        self.assertEqual(minify("<span>a</span> <span>b</span>"), "<span>a</span> <span>b</span>")
        self.assertEqual(minify("<div>a</div> <div>b</div>"), "<div>a</div><div>b</div>")

    def test_empty_attribute_removal(self) -> None:
        out = minify('<input disabled="" value="">', removeEmptyAttributes=True)
        self.assertEqual(out, "<input/>")

    def test_keep_marker_round_trip(self) -> None:
        text = "<div>\n<!-- keep-me: do not touch -->\n<!-- drop me -->\n</div>"
        out = minify(text, {"keepMarkers": ["keep-me"]})
        self.assertEqual(out, "<div><!-- keep-me: do not touch --></div>")

    def test_nbsp_guard(self) -> None:
        self.assertEqual(minify("<p>a\u00a0\u00a0b</p>"), "<p>a\u00a0\u00a0b</p>")

    def test_full_document(self) -> None:
        text = "<!DOCTYPE html>\n<html>\n<body>\n  <p>x</p>\n</body>\n</html>\n"
        self.assertEqual(minify(text), "<!doctype html><html><body><p>x</p></body></html>")

    def test_preserve_element_open_tag_is_not_rewritten(self) -> None:
        text = '<script type="text/javascript">\n  var a  =  1;\n</script>'
        self.assertEqual(minify(text), text)

    def test_comments(self) -> None:
        text = "<!--[if IE]><p>x</p><![endif]--> <!-- gone --><p>y</p>"
        self.assertEqual(minify(text), "<!--[if IE]><p>x</p><![endif]--><p>y</p>")
        self.assertEqual(minify("<p>a</p> <!-- c -->", remove_comments=False), "<p>a</p><!-- c -->")

    def test_collapse_disabled(self) -> None:
        out = minify('<p  class="a" >\n  x  \n</p>', collapse_whitespace=False)
        self.assertEqual(out, '<p class="a">\n  x  \n</p>')

    def test_non_string_input(self) -> None:
        self.assertEqual(minify(None), "")
        self.assertEqual(minify(b"<p>x</p>"), "")
        self.assertEqual(minify(42), "")
        self.assertEqual(minify(""), "")

    def test_unknown_options_are_ignored(self) -> None:
        self.assertEqual(minify("<p> x </p>", {"sortAttributes": True}), "<p>x</p>")


class TestMalformedInput(unittest.TestCase):
    def test_unterminated_preserve_element_stays_preserved(self) -> None:
        out, errors = minify_with_errors("<p> a </p>\n<pre>  x  ")
        self.assertEqual(out, "<p>a</p><pre>  x  ")
        self.assertEqual([e.code for e in errors], ["unterminated-preserve-element"])

    def test_unterminated_tag_is_passed_through(self) -> None:
        out, errors = minify_with_errors("<p>a</p> <div  class='x")
        self.assertEqual(out, "<p>a</p><div  class='x")
        self.assertEqual([e.code for e in errors], ["eof-in-tag"])
        self.assertEqual(errors[0].offset, 9)

    def test_unterminated_comment_is_passed_through(self) -> None:
        out, errors = minify_with_errors("<p>x</p><!-- open  ")
        self.assertEqual(out, "<p>x</p><!-- open  ")
        self.assertEqual([e.code for e in errors], ["eof-in-comment"])

    def test_well_formed_input_reports_nothing(self) -> None:
        _out, errors = minify_with_errors("<p>x</p><pre>y</pre>")
        self.assertEqual(errors, [])

    def test_errors_are_not_collected_outside_the_sink(self) -> None:
        emit_error("ignored")
        self.assertEqual(minify("<p>x</p><pre>y"), "<p>x</p><pre>y")

    def test_keep_comment_inside_attribute_survives_rewrites(self) -> None:
        text = '<input disabled="<!-- keep-me -->" data-x="<!--keep-me-->">'
        out = minify(text, keep_markers=["keep-me"], boolean_attr_shortening=True, remove_empty_attributes=True)
        self.assertEqual(out, '<input disabled="<!-- keep-me -->" data-x="<!--keep-me-->"/>')

    def test_keep_comment_nested_in_plain_comment_is_dropped_with_it(self) -> None:
        text = "<p>a</p><!-- note <!-- keep-me: x --> -->"
        self.assertEqual(minify(text, keep_markers=["keep-me"]), "<p>a</p>-->")
        self.assertEqual(minify(text, keep_markers=["keep-me"]), minify(text))
        self.assertEqual(minify("<!--<!-- keep-me k --><!-- c --><div>", keep_markers=["keep-me"]), "<div>")

    def test_nbsp_text_at_region_edge_is_not_trimmed(self) -> None:
        text = "<p>x</p>  a\u00a0b  "
        self.assertEqual(minify(text), text)


class TestConcurrency(unittest.TestCase):
    def test_concurrent_calls_match_serial_results(self) -> None:
        inputs = CORPUS * 8
        expected = [minify(text) for text in inputs]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(minify, inputs))
        self.assertEqual(results, expected)

    def test_error_sinks_are_per_call(self) -> None:
        def run(text):
            return [e.code for e in minify_with_errors(text)[1]]

        inputs = ["<p>x</p>", "<pre>open", "<div class='x"] * 10
        with ThreadPoolExecutor(max_workers=6) as pool:
            results = list(pool.map(run, inputs))
        self.assertEqual(results, [run(text) for text in inputs])
