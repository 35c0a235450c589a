# io package
from .loaders import (
    # Relational
    load_tree_df,
    load_tree_csv,

    # Hierarchical
    load_tree_node_list,
    load_tree_yaml,
    load_tree_json,

    # Path strings
    load_tree_df_path,
    load_tree_csv_path
)
from .render import format_tree, print_tree
from .visualize import build_network, save_tree_html

__all__ = [
    'load_tree_df',
    'load_tree_csv',
    'load_tree_node_list',
    'load_tree_yaml',
    'load_tree_json',
    'load_tree_df_path',
    'load_tree_csv_path',
    'format_tree',
    'print_tree',
    'build_network',
    'save_tree_html'
]
