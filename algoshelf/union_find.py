"""Disjoint-set structures over nodes numbered from 1."""

from __future__ import annotations

from typing import Optional


class UnionFind:
    """Union by size with path compression over nodes ``1..n``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self.n = n
        self.reset()

    def reset(self) -> None:
        """Put every node back into its own set."""
        self._parent = list(range(self.n + 1))
        self._size = [1] * (self.n + 1)
        self._sets = self.n

    def _check(self, x: int) -> None:
        if not 1 <= x <= self.n:
            raise IndexError(f"node {x} out of range")

    def find(self, x: int) -> int:
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Join the sets of ``x`` and ``y``; False if they were already one."""
        rx, ry = self.find(x), self.find(y)
        if rx == ry:
            return False
        if self._size[rx] < self._size[ry]:
            rx, ry = ry, rx
        self._parent[ry] = rx
        self._size[rx] += self._size[ry]
        self._sets -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def __len__(self) -> int:
        """Number of disjoint sets."""
        return self._sets


class WeightedUnionFind:
    """Disjoint sets whose nodes carry values known relative to one another."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self.n = n
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)
        # value[v] - value[parent[v]]
        self._offset = [0] * (n + 1)
        self._sets = n

    def __len__(self) -> int:
        return self._sets

    def find(self, x: int) -> tuple[int, int]:
        """Return the root of ``x`` and ``value[x] - value[root]``."""
        if not 1 <= x <= self.n:
            raise IndexError(f"node {x} out of range")
        path = []
        node = x
        while self._parent[node] != node:
            path.append(node)
            node = self._parent[node]
        root = node
        for v in reversed(path):
            p = self._parent[v]
            if p != root:
                self._offset[v] += self._offset[p]
                self._parent[v] = root
        return root, self._offset[x] if x != root else 0

    def union(self, x: int, y: int, diff: int) -> bool:
        """Record ``value[y] - value[x] == diff``.

        Nodes already in one set are left alone and False is returned.
        """
        rx, ox = self.find(x)
        ry, oy = self.find(y)
        if rx == ry:
            return False
        # value[ry] - value[rx]
        gap = diff + ox - oy
        if self._size[rx] >= self._size[ry]:
            self._parent[ry] = rx
            self._offset[ry] = gap
            self._size[rx] += self._size[ry]
        else:
            self._parent[rx] = ry
            self._offset[rx] = -gap
            self._size[ry] += self._size[rx]
        self._sets -= 1
        return True

    def difference(self, x: int, y: int) -> Optional[int]:
        """``value[y] - value[x]``, or ``None`` if the two are not related."""
        rx, ox = self.find(x)
        ry, oy = self.find(y)
        if rx != ry:
            return None
        return oy - ox


class TeamRegistry:
    """Players ``1..players`` joining teams ``1..teams`` that can merge."""

    def __init__(self, players: int, teams: int) -> None:
        if players < 0 or teams < 0:
            raise ValueError("counts must not be negative")
        self.players = players
        self.teams = teams
        self._team_of: list[Optional[int]] = [None] * (players + 1)
        self._members = [0] * (teams + 1)
        self._parent = list(range(teams + 1))

    def _check_player(self, player: int) -> None:
        if not 1 <= player <= self.players:
            raise IndexError(f"player {player} out of range")

    def _root(self, team: int) -> int:
        if not 1 <= team <= self.teams:
            raise IndexError(f"team {team} out of range")
        root = team
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[team] != root:
            self._parent[team], team = root, self._parent[team]
        return root

    def join(self, player: int, team: int) -> None:
        """Move ``player`` into ``team``, leaving any team they were in."""
        self._check_player(player)
        new_root = self._root(team)
        old = self._team_of[player]
        if old is not None:
            self._members[self._root(old)] -= 1
        self._team_of[player] = team
        self._members[new_root] += 1

    def merge_teams(self, a: int, b: int) -> None:
        ra, rb = self._root(a), self._root(b)
        if ra == rb:
            return
        self._parent[ra] = rb
        self._members[rb] += self._members[ra]

    def same_team(self, x: int, y: int) -> bool:
        self._check_player(x)
        self._check_player(y)
        tx, ty = self._team_of[x], self._team_of[y]
        if tx is None or ty is None:
            return False
        return self._root(tx) == self._root(ty)

    def team_size(self, player: int) -> int:
        """Members of the player's (merged) team; 0 if the player has none."""
        self._check_player(player)
        team = self._team_of[player]
        if team is None:
            return 0
        return self._members[self._root(team)]