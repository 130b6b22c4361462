"""
关系图管道

协调文本抽取、图合并、DOT 导出和 PNG 渲染的完整流程
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from gossip_graph.config import get_settings
from gossip_graph.export import DotExporter, GraphvizRenderer, NullRenderer, Renderer
from gossip_graph.extraction import GraphBuilder, RelationExtractor, RelationGraph, RelationTriple
from gossip_graph.utils import get_logger, load_text_file, save_json_file

logger = get_logger(__name__)


@dataclass
class PipelineResult:
    """一次运行的结果"""

    graph: RelationGraph
    triples: list[RelationTriple] = field(default_factory=list)
    dot_path: Path | None = None
    png_path: Path | None = None
    json_path: Path | None = None


class GossipGraphPipeline:
    """关系图管道"""

    def __init__(
        self,
        extractor: RelationExtractor | None = None,
        builder: GraphBuilder | None = None,
        exporter: DotExporter | None = None,
        renderer: Renderer | None = None,
    ):
        """
        初始化管道

        Args:
            extractor: 关系抽取器
            builder: 图构建器
            exporter: DOT 导出器
            renderer: PNG 渲染器；为空时按配置选择 Graphviz 或不渲染
        """
        settings = get_settings()

        self.extractor = extractor or RelationExtractor()
        self.builder = builder or GraphBuilder(self.extractor)
        self.exporter = exporter or DotExporter(label_delimiter=settings.label_delimiter)
        if renderer is None:
            renderer = GraphvizRenderer() if settings.render_png else NullRenderer()
        self.renderer = renderer
        self.encoding = settings.text_encoding

    def extract(self, texts: Iterable[str]) -> list[RelationTriple]:
        """依次抽取多段文本，按文本顺序拼接三元组"""
        triples: list[RelationTriple] = []
        for text in texts:
            triples.extend(self.extractor.extract(text))
        return triples

    def build_graph(self, texts: Iterable[str]) -> RelationGraph:
        """从多段文本构建一张关系图"""
        return self.builder.merge(self.extract(texts))

    def load_texts(self, file_paths: Iterable[str | Path]) -> list[str]:
        """
        读取输入文件

        Raises:
            FileNotFoundError: 文件不存在
        """
        texts = []
        for file_path in file_paths:
            logger.info("Loading text", file=str(file_path))
            texts.append(load_text_file(file_path, encoding=self.encoding))
        return texts

    def run(
        self,
        texts: str | Iterable[str],
        dot_path: str | Path,
        png_path: str | Path | None = None,
        json_path: str | Path | None = None,
    ) -> PipelineResult:
        """
        抽取关系、构建关系图并导出

        Args:
            texts: 一段或多段文本
            dot_path: DOT 输出路径
            png_path: PNG 输出路径，为空时不渲染
            json_path: 关系图 JSON 输出路径，为空时不输出

        Returns:
            运行结果
        """
        if isinstance(texts, str):
            texts = [texts]

        triples = self.extract(texts)
        graph = self.builder.merge(triples)
        result = PipelineResult(graph=graph, triples=triples)

        result.dot_path = self.exporter.write(graph, dot_path)

        if json_path:
            result.json_path = save_json_file(graph.to_dict(), json_path)

        # 渲染失败不影响流程
        if png_path and self.renderer.render(result.dot_path, png_path):
            result.png_path = Path(png_path)

        return result
