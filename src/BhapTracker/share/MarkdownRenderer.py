import markdown


class MarkdownRenderer:
    """
    将 BHAP 正文从 Markdown 转换为 HTML。
    """

    # 单个换行也渲染为 <br />，与作者编辑时看到的一致
    EXTENSIONS = ["nl2br", "fenced_code", "tables"]

    @staticmethod
    def render(content: str) -> str:
        """
        渲染 Markdown 文本。

        Args:
            content: Markdown 源文本。

        Returns:
            HTML 文本。空内容返回空字符串。
        """
        if not content:
            return ""
        return markdown.markdown(content, extensions=MarkdownRenderer.EXTENSIONS)
