"""Tests for connector routing between the panel and the highlighted element."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pygame

from client.connector import compute_connector

PANEL = pygame.Rect(0, 0, 100, 50)   # left 0, top 0, right 100, bottom 50


def is_single_right_angle(path):
    (x1, y1), (x2, y2), (x3, y3) = path
    first_horizontal = y1 == y2 and x1 != x2
    first_vertical = x1 == x2 and y1 != y2
    if first_horizontal:
        return x2 == x3
    if first_vertical:
        return y2 == y3
    return False


class TestDirections:
    def test_target_right(self):
        target = pygame.Rect(200, 100, 40, 40)
        path = compute_connector(PANEL, target)
        assert path == [(100, 25), (200, 25), (200, 120)]
        assert path[0][0] == PANEL.right
        assert path[-1][0] == target.left

    def test_target_below(self):
        target = pygame.Rect(60, 120, 40, 20)
        path = compute_connector(PANEL, target)
        assert path == [(50, 50), (50, 120), (80, 120)]
        assert path[0][1] == PANEL.bottom
        assert path[-1][1] == target.top

    def test_target_left(self):
        panel = pygame.Rect(300, 300, 100, 50)
        target = pygame.Rect(100, 200, 50, 30)
        path = compute_connector(panel, target)
        assert path == [(300, 325), (150, 325), (150, 215)]
        assert path[0][0] == panel.left
        assert path[-1][0] == target.right

    def test_target_above(self):
        panel = pygame.Rect(300, 300, 100, 50)
        target = pygame.Rect(320, 100, 200, 50)
        path = compute_connector(panel, target)
        assert path == [(350, 300), (350, 150), (420, 150)]
        assert path[0][1] == panel.top
        assert path[-1][1] == target.bottom


class TestPriority:
    def test_right_beats_below(self):
        target = pygame.Rect(200, 200, 20, 20)
        path = compute_connector(PANEL, target)
        assert path[0] == (PANEL.right, PANEL.centery)

    def test_below_beats_left(self):
        panel = pygame.Rect(300, 300, 100, 50)
        target = pygame.Rect(100, 500, 20, 20)
        path = compute_connector(panel, target)
        assert path[0] == (panel.centerx, panel.bottom)

    def test_left_beats_above(self):
        panel = pygame.Rect(300, 300, 100, 50)
        target = pygame.Rect(100, 100, 20, 20)
        path = compute_connector(panel, target)
        assert path[0] == (panel.left, panel.centery)

    def test_bend_is_orthogonal(self):
        for target in (pygame.Rect(200, 100, 40, 40), pygame.Rect(10, 300, 500, 40)):
            assert is_single_right_angle(compute_connector(PANEL, target))


class TestNoConnector:
    def test_overlapping(self):
        assert compute_connector(PANEL, pygame.Rect(50, 20, 100, 100)) is None

    def test_contained(self):
        assert compute_connector(PANEL, pygame.Rect(10, 10, 10, 10)) is None

    def test_edge_adjacent_right(self):
        assert compute_connector(PANEL, pygame.Rect(100, 0, 50, 50)) is None

    def test_edge_adjacent_below(self):
        assert compute_connector(PANEL, pygame.Rect(0, 50, 100, 50)) is None
