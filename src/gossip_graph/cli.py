"""
命令行入口

用法：
  演示：    gossip-graph
  关系图：  gossip-graph graph --file=data/my_text.txt --out=graph.dot --png=graph.png
            或：gossip-graph graph --text="A loves B. B betrayed C." --out=graph.dot
  时间线：  gossip-graph timeline --file=data/my_events.txt
"""

import argparse
import sys
from datetime import date

from gossip_graph.config import get_settings
from gossip_graph.export import NullRenderer
from gossip_graph.pipeline import GossipGraphPipeline, PipelineResult
from gossip_graph.timeline import TimelineEvent, format_events, load_events, sort_events
from gossip_graph.utils import get_logger, setup_logging

logger = get_logger(__name__)

DEMO_TEXT = (
    "ZhenHuan loves King GuoJun. "
    "YongZheng loves ZhenHuan. "
    "HuaFei is jealous of ZhenHuan. "
    "AnLingRong betrayed ZhenHuan. "
    "ZhenHuan is together with YongZheng. "
    "King GuoJun is hostile to YongZheng. "
    "ShenMeiZhuang supports ZhenHuan."
)

DEMO_EVENTS = [
    TimelineEvent(date(1720, 6, 1), "ZhenHuan enters the palace"),
    TimelineEvent(date(1722, 12, 20), "YongZheng enthroned"),
    TimelineEvent(date(1723, 8, 15), "GuoJun Prince travels"),
    TimelineEvent(date(1724, 1, 10), "HuaFei falls from favor"),
]


def _generated_message(result: PipelineResult) -> str:
    message = f"Generated {result.dot_path}"
    if result.png_path is not None:
        message += f" & {result.png_path}"
    return message


def build_parser() -> argparse.ArgumentParser:
    """构建参数解析器"""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="gossip-graph",
        description="从中英文文本抽取人物关系，导出 DOT 并尽力生成 PNG",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {settings.app_version}")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="日志级别（默认读取配置）",
    )
    subparsers = parser.add_subparsers(dest="mode")

    graph_parser = subparsers.add_parser("graph", help="构建人物关系图")
    source = graph_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", type=str, help="直接输入的文本")
    source.add_argument(
        "--file",
        type=str,
        action="append",
        dest="files",
        help="UTF-8 文本文件路径，可重复指定，多个文件合并为一张图",
    )
    graph_parser.add_argument(
        "--out", type=str, default=settings.dot_output_path, help="DOT 输出路径"
    )
    graph_parser.add_argument(
        "--png", type=str, default=settings.png_output_path, help="PNG 输出路径"
    )
    graph_parser.add_argument("--no-png", action="store_true", help="不调用 Graphviz")
    graph_parser.add_argument("--json", type=str, default=None, help="关系图 JSON 输出路径")

    timeline_parser = subparsers.add_parser("timeline", help="按日期输出时间线")
    timeline_parser.add_argument(
        "--file",
        type=str,
        required=True,
        help="事件文件，每行格式：YYYY-MM-DD <描述>",
    )

    return parser


def run_demo() -> int:
    """演示：示例文本生成关系图，并打印示例时间线"""
    settings = get_settings()
    pipeline = GossipGraphPipeline()
    result = pipeline.run(
        DEMO_TEXT,
        dot_path=settings.dot_output_path,
        png_path=settings.png_output_path,
    )
    print(_generated_message(result))
    print(format_events(sort_events(DEMO_EVENTS)))
    return 0


def run_graph(args: argparse.Namespace) -> int:
    """graph 模式"""
    pipeline = GossipGraphPipeline(renderer=NullRenderer() if args.no_png else None)

    if args.text is not None:
        texts = [args.text]
    else:
        try:
            texts = pipeline.load_texts(args.files)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Input file unreadable", error=str(e))
            print(e, file=sys.stderr)
            return 1

    result = pipeline.run(
        texts,
        dot_path=args.out,
        png_path=None if args.no_png else args.png,
        json_path=args.json,
    )
    print(_generated_message(result))
    return 0


def run_timeline(args: argparse.Namespace) -> int:
    """timeline 模式"""
    settings = get_settings()
    try:
        events = load_events(args.file, encoding=settings.text_encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Timeline file unreadable", error=str(e))
        print(e, file=sys.stderr)
        return 1

    print(format_events(events))
    return 0


def main(argv: list[str] | None = None) -> int:
    """主函数"""
    settings = get_settings()
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(log_level=args.log_level or settings.log_level, json_format=settings.log_json)

    if args.mode == "graph":
        return run_graph(args)
    if args.mode == "timeline":
        return run_timeline(args)
    return run_demo()


if __name__ == "__main__":
    sys.exit(main())
