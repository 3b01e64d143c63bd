from surftext.graph.ngram import GraphLoadResult, NGramGraph, load_graph

__all__ = ["GraphLoadResult", "NGramGraph", "load_graph"]
