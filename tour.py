from instance import TSPInstance

from typing import Iterator, List, Sequence


class Tour:
    """
    Closed tour stored as a cyclic doubly linked list:
    - succ[i] is the node visited after i
    - pred[i] is the node visited before i
    The direction of traversal carries no meaning, the tour is an undirected cycle.
    """

    def __init__(self, instance: TSPInstance, succ: List[int], pred: List[int]):
        self.instance = instance
        self.succ = succ
        self.pred = pred

    @classmethod
    def from_order(cls, instance: TSPInstance, order: Sequence[int]) -> "Tour":
        """
        Link the nodes in the given order, last one back to the first
        """
        n = instance.n
        if len(order) != n or set(order) != set(range(n)):
            raise ValueError("Order must visit each city exactly once (Hamiltonian cycle)")

        succ = [0] * n
        pred = [0] * n
        for k in range(n):
            i = order[k]
            j = order[(k + 1) % n]
            succ[i] = j
            pred[j] = i
        return cls(instance, succ, pred)

    def successor(self, i: int) -> int:
        return self.succ[i]

    def predecessor(self, i: int) -> int:
        return self.pred[i]

    def length(self) -> float:
        """
        Sum of the successor edges over one full traversal
        """
        if len(self.succ) < 2:
            return 0.0
        dist = self.instance.distance
        succ = self.succ
        length = 0.0
        start = curr = 0
        while True:
            nxt = succ[curr]
            length += dist(curr, nxt)
            curr = nxt
            if curr == start:
                return length

    def order(self, anchor: int = 0) -> List[int]:
        """
        Visiting order read from the anchor node
        """
        if not self.succ:
            return []
        order = [anchor]
        curr = self.succ[anchor]
        while curr != anchor:
            order.append(curr)
            curr = self.succ[curr]
        return order

    def reverse_segment(self, frm: int, to: int) -> None:
        """
        Reverse the path frm -> ... -> to (following succ) in place.

        Before: p -> frm -> ... -> to -> q
        After:  p -> to -> ... -> frm -> q

        Only the nodes of the segment are visited. `to` must be reachable
        from `frm` going forward. Calling reverse_segment(to, frm) afterwards
        restores the previous links.
        """
        succ, pred = self.succ, self.pred
        p = pred[frm]
        q = succ[to]
        whole_cycle = p == to

        node = frm
        while True:
            nxt = succ[node]
            succ[node], pred[node] = pred[node], nxt
            if node == to:
                break
            node = nxt

        if whole_cycle:
            # every link already flipped, nothing to reconnect
            return

        succ[p] = to
        pred[to] = p
        succ[frm] = q
        pred[q] = frm

    def two_opt_move(self, a: int, b: int, c: int, d: int) -> None:
        """
        Replace edges (a, b) and (c, d) by (a, c) and (b, d).
        Expects b == succ[a] and d == succ[c].
        """
        self.reverse_segment(b, c)

    def validate(self) -> None:
        """
        Check the link invariants, raise ValueError when broken
        """
        n = len(self.succ)
        if len(self.pred) != n or n != self.instance.n:
            raise ValueError("Successor and predecessor arrays must cover every city")

        for i in range(n):
            if self.pred[self.succ[i]] != i or self.succ[self.pred[i]] != i:
                raise ValueError(f"Inconsistent links at city {i}")

        if n and len(self.order()) != n:
            raise ValueError("Tour must be a single cycle through every city")

    def copy(self) -> "Tour":
        return Tour(self.instance, self.succ[:], self.pred[:])

    def __len__(self) -> int:
        return len(self.succ)

    def __iter__(self) -> Iterator[int]:
        return iter(self.order())

    def __repr__(self) -> str:
        order = self.order()
        tour_str = " => ".join(map(str, order[:5])) + ("..." if len(order) > 5 else "")
        return f"Tour(n={len(self)}, order={tour_str})"
