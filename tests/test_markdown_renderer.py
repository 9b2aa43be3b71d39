"""MarkdownRenderer 的测试"""

from BhapTracker.share.MarkdownRenderer import MarkdownRenderer


class TestMarkdownRenderer:
    def test_hard_line_breaks(self):
        html = MarkdownRenderer.render("第一行\n第二行")
        assert "<br />" in html

    def test_heading(self):
        assert "<h1>标题</h1>" in MarkdownRenderer.render("# 标题")

    def test_empty(self):
        assert MarkdownRenderer.render("") == ""
