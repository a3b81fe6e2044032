"""工具模块"""
from .batch import load_expressions, evaluate_expressions, summarize_results

__all__ = ['load_expressions', 'evaluate_expressions', 'summarize_results']
