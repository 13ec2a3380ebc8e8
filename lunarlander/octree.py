"""Point octree over a mesh, with ray and box queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from lunarlander.box import Box
from lunarlander.mesh import Mesh
from lunarlander.ray import Ray


@dataclass
class TreeNode:
    """One cell of the octree and the vertex indices it holds."""

    box: Box = field(default_factory=Box)
    points: list[int] = field(default_factory=list)
    children: list[TreeNode] = field(default_factory=list)
    intersects: bool = False


@dataclass
class Octree:
    """Octree subdividing a mesh's vertices."""

    mesh: Mesh = field(default_factory=Mesh)
    root: TreeNode = field(default_factory=TreeNode)

    def create(self, mesh: Mesh, num_levels: int) -> None:
        """Build the tree over every vertex of ``mesh``, at most ``num_levels`` deep."""
        self.mesh = mesh
        self.root = TreeNode(box=mesh.bounds(), points=list(range(len(mesh.vertices))))
        self.subdivide(self.root, num_levels, 1)

    def subdivide(self, node: TreeNode, num_levels: int, level: int) -> None:
        """Split ``node`` into non-empty children and recurse into those holding more than one point."""
        if level >= num_levels:
            return
        for child_box in node.box.subdivide8():
            points = self.points_in_box(node.points, child_box)
            if points:
                node.children.append(TreeNode(box=child_box, points=points))
        node.points = []
        for child in node.children:
            if len(child.points) != 1:
                child.intersects = True
                self.subdivide(child, num_levels, level + 1)

    def intersect_ray(self, ray: Ray, node: TreeNode | None = None) -> TreeNode | None:
        """First single-point node whose box the ray crosses, or None."""
        if node is None:
            node = self.root
        if not node.box.intersect(ray, -1000, 1000):
            return None
        if len(node.points) == 1:
            return node
        for child in node.children:
            hit = self.intersect_ray(ray, child)
            if hit is not None:
                return hit
        return None

    def intersect_box(self, box: Box, node: TreeNode | None = None) -> list[Box]:
        """Boxes of single-point nodes that overlap ``box``."""
        if node is None:
            node = self.root
        found: list[Box] = []
        if node.box.overlap(box):
            if len(node.points) == 1:
                found.append(node.box)
            for child in node.children:
                found.extend(self.intersect_box(box, child))
        return found

    def points_in_box(self, points: Iterable[int], box: Box) -> list[int]:
        """Those vertex indices whose vertex lies in ``box``."""
        return [i for i in points if box.inside(self.mesh.vertices[i])]

    def faces_in_box(self, faces: Iterable[int], box: Box) -> list[int]:
        """Those face indices whose corners all lie in ``box``."""
        return [i for i in faces if box.inside_all(self.mesh.face_vertices(i))]

    def leaves(self, node: TreeNode | None = None) -> Iterator[TreeNode]:
        """Nodes without children, depth first."""
        if node is None:
            node = self.root
        if not node.children:
            yield node
            return
        for child in node.children:
            yield from self.leaves(child)

    def boxes_at_level(self, level: int) -> list[Box]:
        """Boxes of all nodes at ``level``, the root being level 1."""
        nodes = [self.root]
        for _ in range(level - 1):
            nodes = [child for n in nodes for child in n.children]
        return [n.box for n in nodes]