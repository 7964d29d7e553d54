from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose as numpy_allclose

from ssection.core.preprocessing.geometry import (
    CirclePart, PartMerge, Point, PolygonPart, as_point, circumcircle,
    closest_point_on_segment, discretize_arc, parts_from_records,
    rotate_part, rotate_point, translate_part
)


def assert_allclose(actual, desired, err_msg='', rtol=1e-7):
    numpy_allclose(actual, desired, err_msg=err_msg, atol=1e-10, rtol=rtol)


class TestPoint(TestCase):

    def test_as_point(self):
        self.assertEqual(as_point((1, 2)), Point(1.0, 2.0))
        self.assertEqual(as_point({'x': 3, 'y': -4, 'id': 'p'}),
                         Point(3.0, -4.0))
        self.assertEqual(as_point(np.array([0.5, 1.5])), Point(0.5, 1.5))
        with self.assertRaises(ValueError):
            as_point((1, 2, 3))
        with self.assertRaises(ValueError):
            as_point({'x': 1})
        with self.assertRaises(TypeError):
            as_point(('a', 1))
        with self.assertRaises(TypeError):
            as_point(5)

    def test_translate_and_distance(self):
        p = Point(1, 1).translate(2, 3)
        self.assertEqual(p, Point(3, 4))
        assert_allclose(Point(0, 0).distance_to(p), 5.0)


class TestCircumcircle(TestCase):

    def test_three_points(self):
        center, r = circumcircle((0, 0), (2, 0), (1, 1))
        assert_allclose(center, (1, 0),
                        err_msg='Center of the circle through (0, 0), '
                                '(2, 0) and (1, 1) must be (1, 0).')
        assert_allclose(r, 1.0)

        center, r = circumcircle((5, 2), (3, 4), (1, 2))
        assert_allclose([center.x, center.y, r], [3, 2, 2])

    def test_collinear(self):
        self.assertIsNone(circumcircle((0, 0), (1, 1), (2, 2)),
                          'Collinear points have no circumcircle.')
        self.assertIsNone(circumcircle((0, 0), (1, 1e-7), (2, 0)))


class TestDiscretizeArc(TestCase):

    def test_arc_through_control(self):
        points = discretize_arc((1, 0), (0, 1), (-1, 0), segments=4)
        self.assertEqual(len(points), 4)
        angles = np.radians([0, 45, 90, 135])
        assert_allclose(
            np.array(points), np.column_stack((np.cos(angles),
                                               np.sin(angles))),
            err_msg='The arc must start at p1, exclude p2 and pass the '
                    'control point.'
        )

    def test_reflex_arc(self):
        end = (np.cos(np.radians(135)), np.sin(np.radians(135)))
        points = discretize_arc((1, 0), (0, -1), end, segments=5)
        angles = np.radians([0, -45, -90, -135, -180])
        assert_allclose(
            np.array(points), np.column_stack((np.cos(angles),
                                               np.sin(angles))),
            err_msg='An arc spanning more than 180 degrees must run over the '
                    'control point, not the short way round.'
        )

    def test_points_on_circle(self):
        points = np.array(discretize_arc((0, 0), (4, 4), (8, 0), 16))
        center, r = circumcircle((0, 0), (4, 4), (8, 0))
        assert_allclose(np.hypot(points[:, 0] - center.x,
                                 points[:, 1] - center.y),
                        np.full(16, r))

    def test_collinear_fallback(self):
        self.assertEqual(discretize_arc((0, 0), (1, 1), (2, 2)),
                         [Point(0, 0), Point(2, 2)])

    def test_invalid_segments(self):
        with self.assertRaises(ValueError):
            discretize_arc((1, 0), (0, 1), (-1, 0), segments=0)


class TestRotatePoint(TestCase):

    def test_full_turn(self):
        for p in [(1, 2), (-3.5, 0.25), (0, 0)]:
            assert_allclose(rotate_point(p, 360), p,
                            err_msg='A full turn must return the point.')

    def test_inverse(self):
        for angle in (17, 90, -133.3):
            q = rotate_point(rotate_point((2, -1), angle), -angle)
            assert_allclose(q, (2, -1),
                            err_msg='Rotating by an angle and back must '
                                    'cancel out.')

    def test_quarter_turn(self):
        assert_allclose(rotate_point((1, 0), 90), (0, 1))
        assert_allclose(rotate_point((0, 2), 90), (-2, 0))


class TestClosestPoint(TestCase):

    def test_projection(self):
        p, d = closest_point_on_segment((0, 0), (10, 0), (5, 3))
        assert_allclose([p.x, p.y, d], [5, 0, 3])

    def test_clamped(self):
        p, d = closest_point_on_segment((0, 0), (10, 0), (-4, 3))
        assert_allclose([p.x, p.y, d], [0, 0, 5],
                        err_msg='Projections beyond an end point must snap '
                                'to that end point.')
        p, d = closest_point_on_segment((0, 0), (10, 0), (13, -4))
        assert_allclose([p.x, p.y, d], [10, 0, 5])

    def test_zero_length(self):
        p, d = closest_point_on_segment((1, 1), (1, 1), (4, 5))
        assert_allclose([p.x, p.y, d], [1, 1, 5])


class TestPolygonPart(TestCase):

    def test_validation(self):
        with self.assertRaises(ValueError):
            PolygonPart([(0, 0), (1, 0), (1, 1)], positive='yes')
        with self.assertRaises(ValueError):
            PolygonPart([(0, 0), (1, 0), (1, 1)], curves={'a': (2, 2)})
        with self.assertRaises(TypeError):
            CirclePart((0, 0), '5')

    def test_discretize_straight(self):
        part = PolygonPart([(0, 0), (4, 0), (4, 2), (0, 2), (0, 0)])
        assert_allclose(
            part.discretize(), [[0, 0], [4, 0], [4, 2], [0, 2]],
            err_msg='A closing duplicate vertex must be dropped.'
        )
        self.assertEqual(PolygonPart([(0, 0), (1, 1)]).discretize().shape,
                         (0, 2))

    def test_discretize_curve(self):
        part = PolygonPart([(0, 0), (2, 0), (2, 2), (0, 2)],
                           curves={1: (3, 1)})
        coords = part.discretize(segments=8)
        self.assertEqual(len(coords), 3 + 8)
        self.assertTrue(np.isclose(coords[:, 0].max(), 3.0),
                        'The bulge must reach the control point.')

    def test_circle(self):
        coords = CirclePart((1, 2), 3).discretize(segments=4)
        assert_allclose(coords, [[4, 2], [1, 5], [-2, 2], [1, -1]])
        self.assertEqual(CirclePart((0, 0), 0).discretize().shape, (0, 2))
        with self.assertRaises(ValueError):
            CirclePart((0, 0), 1).discretize(segments=2)


class TestPartOperations(TestCase):

    def test_rotate_part(self):
        part = PolygonPart([(0, 0), (2, 0), (2, 1)], positive=False,
                           curves={0: (1, -1)})
        rotated = rotate_part(part, 90)
        assert_allclose(np.array(rotated.points),
                        [[0, 0], [0, 2], [-1, 2]])
        assert_allclose(rotated.curves[0], (1, 1))
        self.assertFalse(rotated.positive)

        circle = rotate_part(CirclePart((3, 0), 1), 180)
        assert_allclose(circle.center, (-3, 0))
        self.assertEqual(circle.radius, 1.0)

    def test_translate_part(self):
        part = translate_part(PolygonPart([(0, 0), (1, 0), (0, 1)]), 2, -1)
        self.assertEqual(part.points,
                         [Point(2, -1), Point(3, -1), Point(2, 0)])
        circle = translate_part(CirclePart((0, 0), 2), 1, 1)
        self.assertEqual(circle.center, Point(1, 1))


class TestPartsFromRecords(TestCase):

    def test_parse(self):
        parts = parts_from_records([
            {'id': 'a', 'type': 'solid',
             'points': [{'x': 0, 'y': 0}, {'x': 2, 'y': 0},
                        {'x': 2, 'y': 2}, {'x': 0, 'y': 2}],
             'curves': {'1': {'controlPoint': {'x': 3, 'y': 1}}}},
            {'id': 'b', 'type': 'hole', 'points': [], 'isCircle': True,
             'circleParams': {'x': 1, 'y': 1, 'r': 0.5}},
        ])
        polygon, circle = parts
        self.assertIsInstance(polygon, PolygonPart)
        self.assertTrue(polygon.positive)
        self.assertEqual(polygon.curves, {1: Point(3, 1)})
        self.assertIsInstance(circle, CirclePart)
        self.assertFalse(circle.positive)
        self.assertEqual((circle.center, circle.radius), (Point(1, 1), 0.5))

    def test_invalid(self):
        with self.assertRaises(ValueError):
            parts_from_records([{'type': 'void', 'points': []}])
        with self.assertRaises(ValueError):
            parts_from_records([{
                'type': 'solid', 'points': [(0, 0), (1, 0), (0, 1)],
                'curves': {'first': {'controlPoint': {'x': 1, 'y': 1}}},
            }])


class TestPartMerge(TestCase):

    def test_overlapping_solids(self):
        merge = PartMerge([
            PolygonPart([(0, 0), (2, 0), (2, 2), (0, 2)]),
            PolygonPart([(1, 0), (3, 0), (3, 2), (1, 2)]),
        ])
        assert_allclose(merge.area, 6.0,
                        err_msg='Overlapping solids must be counted once.')
        assert_allclose(merge.centroid, (1.5, 1.0))
        assert_allclose(merge.bounds, [0, 0, 3, 2])

    def test_holes(self):
        merge = PartMerge([
            PolygonPart([(0, 0), (4, 0), (4, 4), (0, 4)]),
            PolygonPart([(1, 1), (2, 1), (2, 2), (1, 2)], positive=False),
            PolygonPart([(1.5, 1), (2.5, 1), (2.5, 2), (1.5, 2)],
                        positive=False),
            PolygonPart([(10, 10), (11, 10), (11, 11)], positive=False),
        ])
        assert_allclose(merge.area, 16 - 1.5,
                        err_msg='Overlapping holes are subtracted once, '
                                'holes outside the solid are ignored.')

    def test_empty(self):
        merge = PartMerge([PolygonPart([(0, 0), (1, 0), (0, 1)],
                                       positive=False)])
        self.assertEqual(merge.area, 0.0)
        self.assertEqual(merge.centroid, Point(0.0, 0.0))
        with self.assertRaises(TypeError):
            PartMerge([[(0, 0), (1, 0), (0, 1)]])
