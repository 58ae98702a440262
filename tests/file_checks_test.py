import ast
import os
import unittest

import parameterized

ROOT = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..")


def files_to_examine(*paths):
    for path in paths:
        for root, _, files in os.walk(os.path.join(ROOT, path)):
            if "__pycache__" in root:
                continue
            for file in files:
                if file.endswith(".py"):
                    yield os.path.relpath(os.path.join(root, file), ROOT)


def read_python_file(path):
    with open(os.path.join(ROOT, path)) as f:
        return f.read()


class GatherImports(ast.NodeVisitor):
    def __init__(self):
        self.imports = set()

    def visit_Import(self, node):
        self.imports.add(node)

    def visit_ImportFrom(self, node):
        self.imports.add(node)


class OnlyDirectImportsTest(unittest.TestCase):
    @parameterized.parameterized.expand(
        [(path,) for path in files_to_examine("tests")]
    )
    def test_only_direct_import(self, path):
        tree = ast.parse(read_python_file(path))
        gatherer = GatherImports()
        gatherer.visit(tree)
        imports = {ast.unparse(node) for node in gatherer.imports}
        imports = {imp for imp in imports if "stepsearch" in imp}

        expected = {"import stepsearch as ss"}

        self.assertEqual(imports | expected, expected)


class NoPrintsTest(unittest.TestCase):
    @parameterized.parameterized.expand(
        [(path,) for path in files_to_examine("stepsearch")]
    )
    def test_no_prints(self, path):
        code = ast.parse(read_python_file(path))
        nodes = ast.walk(code)
        nodes = [node for node in nodes if isinstance(node, ast.Name)]
        nodes = [node for node in nodes if node.id == "print"]
        self.assertEqual(len(nodes), 0)
