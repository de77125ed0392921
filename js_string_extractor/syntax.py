from dataclasses import dataclass, field


@dataclass
class Node:
    line: int

    def children(self):
        return []


@dataclass
class Identifier(Node):
    name: str


@dataclass
class MemberAccess(Node):
    object: Node
    property: str

    def children(self):
        return [self.object]


@dataclass
class Literal(Node):
    value: object


@dataclass
class Call(Node):
    callee: Node
    arguments: list
    # comments right before the first argument, in source order
    comments: list = field(default_factory=list)

    def children(self):
        return [self.callee] + self.arguments


@dataclass
class Other(Node):
    kind: str
    body: list = field(default_factory=list)

    def children(self):
        return self.body


def walk(root):
    """Yield every node of the tree once, parents before their children."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children()))
