"""主程序入口 - 读取一行中缀表达式并输出结果"""
import argparse
import logging
import sys

from config.config import *
from core import InfixEvaluator, InvalidExpressionError, read_tokens, tokenize
from utils import load_expressions, evaluate_expressions, summarize_results

logger = logging.getLogger(__name__)


def run_single(args, stdin=None, stdout=None):
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    if args.expression is not None:
        tokens = tokenize(args.expression)
    else:
        print(CLI_CONFIG["prompt"], file=stdout)
        tokens = read_tokens(stdin)

    evaluator = InfixEvaluator()
    value = None
    try:
        value = evaluator.evaluate(tokens)
    except InvalidExpressionError as e:
        print(f"{CLI_CONFIG['error_prefix']}{e}", file=stdout)
    if value is not None:
        print(value, file=stdout)
    return value


def run_batch(args, stdout=None):
    stdout = stdout or sys.stdout

    expressions = load_expressions(args.file)
    results = evaluate_expressions(expressions)
    summary = summarize_results(results)
    logger.info(f"Evaluated {summary['total']} expressions: "
                f"{summary['valid']} valid, {summary['invalid']} invalid")

    if args.output_path:
        logger.info(f"Saving results to {args.output_path}")
        results.to_csv(args.output_path, index=False)
    else:
        print(results.to_string(index=False), file=stdout)
    return results


def main(args, stdin=None, stdout=None):
    validate_config()
    if args.file:
        return run_batch(args, stdout=stdout)
    return run_single(args, stdin=stdin, stdout=stdout)


def build_parser():
    parser = argparse.ArgumentParser(description="Single-pass infix expression evaluator")

    parser.add_argument(
        "-e", "--expression",
        type=str,
        default=None,
        help="Expression to evaluate instead of reading one line from stdin"
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Evaluate every line of this file (batch mode)"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help=f"Write batch results as CSV (e.g. {BATCH_CONFIG['default_output_path']})"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    return parser


if __name__ == "__main__":
    args = build_parser().parse_args()

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG["format"]
    )
    main(args)
