from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose as numpy_allclose

from ssection.core.preprocessing.geometry import (
    CirclePart, PartMerge, PolygonPart
)
from ssection.core.solution import (
    PlasticModulusSolver, PolygonIntegral, Rectangle, RectangleComposite,
    ScanLineIntegrator, edge_crossings, principal_moments,
    rectangle_moments, section_properties, slice_ranges, subtract_ranges,
    union_ranges
)


def assert_allclose(actual, desired, err_msg='', rtol=1e-7):
    numpy_allclose(actual, desired, err_msg=err_msg, atol=1e-10, rtol=rtol)


SQUARE = np.array([(0, 0), (4, 0), (4, 2), (0, 2)], dtype=float)
L_SHAPE = np.array(
    [(0, 0), (4, 0), (4, 1), (1, 1), (1, 4), (0, 4)], dtype=float
)


class TestRanges(TestCase):

    def test_union(self):
        self.assertEqual(union_ranges([(4, 6), (0, 2), (1, 3), (3, 3.5)]),
                         [(0, 3.5), (4, 6)])
        self.assertEqual(union_ranges([(2, 2), (5, 1)]), [],
                         'Empty intervals must be skipped.')
        self.assertEqual(union_ranges([(0, 10), (2, 3)]), [(0, 10)])

    def test_subtract(self):
        self.assertEqual(
            subtract_ranges([(0, 10)], [(2, 3), (5, 12), (-4, -1)]),
            [(0, 2), (3, 5)]
        )
        self.assertEqual(subtract_ranges([(0, 1), (2, 3)], [(-1, 4)]), [])
        self.assertEqual(subtract_ranges([(0, 1)], []), [(0, 1)])
        self.assertEqual(subtract_ranges([(0, 4)], [(1, 2), (1.5, 3)]),
                         [(0, 1), (3, 4)],
                         'Overlapping cut intervals must be merged first.')

    def test_edge_crossings(self):
        rows, cuts = edge_crossings(SQUARE, np.array([-1.0, 0.5, 1.5, 3.0]))
        self.assertEqual(rows.tolist(), [1, 1, 2, 2],
                         'Lines outside the polygon must have no crossings.')
        assert_allclose(cuts, [0, 4, 0, 4])

        rows, cuts = edge_crossings(L_SHAPE, np.array([0.5, 2.0]))
        self.assertEqual(rows.tolist(), [0, 0, 1, 1])
        assert_allclose(cuts, [0, 4, 0, 1])
        self.assertEqual(len(edge_crossings(SQUARE, np.array([]))[0]), 0)

    def test_slice_ranges(self):
        self.assertEqual(slice_ranges(SQUARE, np.array([1.0])),
                         [[(0.0, 4.0)]])
        self.assertEqual(slice_ranges(SQUARE, np.array([1.0]), axis=0),
                         [[(0.0, 2.0)]])
        self.assertEqual(
            slice_ranges(SQUARE, np.array([0.0, 2.0])), [[(0.0, 4.0)], []],
            'The half-open crossing test counts the lower edge only.'
        )
        self.assertEqual(slice_ranges(L_SHAPE, np.array([0.5, 2.0])),
                         [[(0.0, 4.0)], [(0.0, 1.0)]])
        self.assertEqual(slice_ranges(SQUARE[:2], np.array([1.0])), [[]])


class TestPolygonIntegral(TestCase):

    def test_rectangle(self):
        rect = PolygonIntegral(SQUARE)
        assert_allclose(rect.area, 8.0)
        assert_allclose(rect.centroid, (2.0, 1.0))
        assert_allclose(
            [rect.ixx, rect.iyy, rect.ixy], [4 * 8 / 12, 2 * 64 / 12, 0],
            err_msg='Centroidal moments of a rectangle must equal b h^3 / 12 '
                    'and h b^3 / 12.'
        )

    def test_winding(self):
        ccw = PolygonIntegral(L_SHAPE)
        cw = PolygonIntegral(L_SHAPE[::-1])
        for name in ('area', 'ixx', 'iyy', 'ixy'):
            assert_allclose(getattr(cw, name), getattr(ccw, name),
                            err_msg=f'{name} must not depend on the winding.')

    def test_triangle(self):
        tri = PolygonIntegral(np.array([(0, 0), (3, 0), (0, 3)]))
        assert_allclose(tri.area, 4.5)
        assert_allclose(tri.centroid, (1.0, 1.0))
        assert_allclose([tri.ixx, tri.iyy, tri.ixy], [2.25, 2.25, -1.125])

    def test_degenerate(self):
        line = PolygonIntegral(np.array([(0, 0), (1, 1)]))
        self.assertEqual((line.area, line.ixx, line.ixy), (0.0, 0.0, 0.0))


class TestScanLineIntegrator(TestCase):

    def test_matches_green(self):
        scan = ScanLineIntegrator([L_SHAPE])
        green = PolygonIntegral(L_SHAPE)
        assert_allclose(scan.area, green.area, rtol=1e-9)
        assert_allclose(scan.centroid, green.centroid, rtol=1e-9)
        for name in ('ixx', 'iyy', 'ixy'):
            assert_allclose(
                getattr(scan, name), getattr(green, name), rtol=1e-5,
                err_msg=f'Scan-line {name} must agree with Green\'s theorem '
                        f'for a single simple polygon.'
            )

    def test_hole(self):
        outer = np.array([(0, 0), (4, 0), (4, 2), (0, 2)])
        hole = np.array([(1, 0.5), (3, 0.5), (3, 1.5), (1, 1.5)])
        scan = ScanLineIntegrator([outer], [hole])
        assert_allclose(scan.area, 6.0, rtol=1e-9)
        assert_allclose(scan.centroid, (2.0, 1.0), rtol=1e-9)
        assert_allclose(
            scan.ixx, 4 * 8 / 12 - 2 * 1 / 12, rtol=1e-5,
            err_msg='A concentric hole must subtract its own moment.'
        )
        assert_allclose(scan.iyy, 2 * 64 / 12 - 1 * 8 / 12, rtol=1e-5)

    def test_disjoint_hole(self):
        solids = [np.array([(0, 0), (4, 0), (4, 1), (0, 1)]),
                  np.array([(0, 1), (1, 1), (1, 4), (0, 4)])]
        notch = np.array([(2, 2), (3, 2), (3, 3), (2, 3)])
        plain = ScanLineIntegrator(solids)
        for hole in (notch, SQUARE + 10):
            scan = ScanLineIntegrator(solids, [hole])
            assert_allclose(
                [scan.area, *scan.centroid, scan.ixx, scan.iyy, scan.ixy],
                [plain.area, *plain.centroid, plain.ixx, plain.iyy,
                 plain.ixy],
                rtol=1e-12,
                err_msg='A hole outside every solid changes neither area, '
                        'centroid nor any moment.'
            )

    def test_strips_and_slices(self):
        left = np.array([(0, 0), (2, 0), (2, 2), (0, 2)])
        right = np.array([(2, 0), (4, 0), (4, 2), (2, 2)])
        scan = ScanLineIntegrator([left, right], steps=2)
        positions, step, rows, starts, ends = scan.strips()
        assert_allclose(positions, [0.5, 1.5])
        self.assertEqual(step, 1.0)
        self.assertEqual(rows.tolist(), [0, 0, 1, 1])
        assert_allclose(starts, [0, 2, 0, 2])
        assert_allclose(ends, [2, 4, 2, 4])
        self.assertIs(scan.strips(), scan.strips(),
                      'The scan of a direction must run only once.')
        self.assertEqual(scan.slices()[2], [[(0.0, 4.0)], [(0.0, 4.0)]],
                         'Touching strips must be joined per line.')

    def test_overlapping_solids(self):
        other = np.array([(1, 0), (3, 0), (3, 2), (1, 2)])
        square = np.array([(0, 0), (2, 0), (2, 2), (0, 2)])
        scan = ScanLineIntegrator([square, other])
        assert_allclose(scan.area, 6.0, rtol=1e-9)
        assert_allclose(scan.centroid, (1.5, 1.0), rtol=1e-9)
        assert_allclose(scan.iyy, 2 * 27 / 12, rtol=1e-9)

    def test_against_shapely(self):
        parts = [
            CirclePart((0, 0), 50),
            PolygonPart([(-10, -10), (10, -10), (10, 10), (-10, 10)],
                        positive=False),
            CirclePart((30, 0), 8, positive=False),
        ]
        scan = ScanLineIntegrator.from_parts(parts)
        merge = PartMerge(parts)
        assert_allclose(scan.area, merge.area, rtol=1e-5,
                        err_msg='Scan-line area must match the exact boolean '
                                'region.')
        assert_allclose(scan.centroid.x, merge.centroid.x, rtol=1e-4)
        self.assertAlmostEqual(scan.centroid.y, merge.centroid.y, places=6)

    def test_no_solids(self):
        scan = ScanLineIntegrator([], [SQUARE])
        self.assertEqual(scan.area, 0.0)
        self.assertEqual((scan.ixx, scan.iyy, scan.ixy), (0.0, 0.0, 0.0))
        self.assertIsNone(scan.bounds)

    def test_invalid(self):
        with self.assertRaises(ValueError):
            ScanLineIntegrator([SQUARE], steps=0)
        with self.assertRaises(TypeError):
            ScanLineIntegrator.from_parts([SQUARE])


class TestPlasticModulusSolver(TestCase):

    def test_rectangle(self):
        rect = np.array([(0, 0), (100, 0), (100, 200), (0, 200)])
        plastic = PlasticModulusSolver([rect])
        assert_allclose(plastic.zz, 100 * 200 ** 2 / 4, rtol=1e-9,
                        err_msg='Z of a rectangle must equal b d^2 / 4.')
        assert_allclose(plastic.zy, 200 * 100 ** 2 / 4, rtol=1e-9)
        assert_allclose([plastic.neutral_axis_z, plastic.neutral_axis_y],
                        [100, 50], rtol=1e-9)

    def test_circle(self):
        r = 50
        circle = CirclePart((0, 0), r).discretize(512)
        plastic = PlasticModulusSolver([circle])
        assert_allclose(plastic.zz, 4 / 3 * r ** 3, rtol=1e-3,
                        err_msg='Z of a circle must approach 4/3 r^3.')
        assert_allclose(plastic.zy, 4 / 3 * r ** 3, rtol=1e-3)

    def test_unsymmetric(self):
        # T-section, flange 200 x 20 on top of a 20 x 180 web, drawing y down
        tee = np.array([
            (-100, -100), (100, -100), (100, -80), (10, -80), (10, 100),
            (-10, 100), (-10, -80), (-100, -80),
        ])
        plastic = PlasticModulusSolver([tee])
        assert_allclose(plastic.neutral_axis_z, -81, rtol=1e-7,
                        err_msg='The neutral axis must split the area in '
                                'half.')
        assert_allclose(plastic.zz, 363800, rtol=1e-7)

    def test_shared_scans(self):
        outer = np.array([(0, 0), (100, 0), (100, 200), (0, 200)])
        hole = np.array([(10, 10), (90, 10), (90, 190), (10, 190)])
        scan = ScanLineIntegrator([outer], [hole])
        plastic = PlasticModulusSolver.from_section(scan)
        fresh = PlasticModulusSolver([outer], [hole])
        assert_allclose([plastic.zz, plastic.zy], [fresh.zz, fresh.zy],
                        rtol=1e-12)
        self.assertIs(plastic.strips(1), scan.strips(1),
                      'The plastic solver must reuse the horizontal scan.')

    def test_empty(self):
        plastic = PlasticModulusSolver([])
        self.assertEqual((plastic.zz, plastic.zy), (0.0, 0.0))


class TestRectangleComposite(TestCase):

    def test_rectangle_moments(self):
        r = rectangle_moments(100, 200, 100, 50)
        assert_allclose([r.area, r.iz_local, r.iy_local],
                        [20000, 100 * 200 ** 3 / 12, 200 * 100 ** 3 / 12])
        self.assertEqual((r.y, r.z, r.sign), (100, 50, 1))

    def test_t_section(self):
        tee = RectangleComposite([
            Rectangle(20, 180, 90, 100),
            Rectangle(200, 20, 190, 100),
        ])
        assert_allclose(tee.area, 7600)
        assert_allclose(tee.centroid_y, 1084000 / 7600)
        assert_allclose(tee.centroid_z, 100)
        assert_allclose(tee.neutral_axis_z, 181)
        assert_allclose(tee.zz, 363800,
                        err_msg='Exact plastic modulus of the T-section.')
        assert_allclose(tee.neutral_axis_y, 100)
        assert_allclose(tee.zy, 2 * (20 * 100 ** 2 / 2 + 180 * 10 ** 2 / 2))

    def test_hole(self):
        hollow = RectangleComposite([
            Rectangle(100, 200, 100, 50),
            Rectangle(80, 180, 100, 50, positive=False),
        ])
        assert_allclose(hollow.area, 5600)
        assert_allclose(hollow.iz, (100 * 200 ** 3 - 80 * 180 ** 3) / 12)
        assert_allclose(hollow.zz, (100 * 200 ** 2 - 80 * 180 ** 2) / 4)
        assert_allclose(hollow.zy, (200 * 100 ** 2 - 180 * 80 ** 2) / 4)

    def test_product_of_inertia(self):
        angle = RectangleComposite([
            rectangle_moments(10, 140, 80, 5),
            rectangle_moments(100, 10, 5, 50),
        ])
        assert_allclose([angle.centroid_y, angle.centroid_z], [48.75, 23.75])
        assert_allclose(angle.izy, -1968750,
                        err_msg='An angle with the heel bottom-left has a '
                                'negative product of inertia.')

    def test_empty(self):
        empty = RectangleComposite([])
        self.assertEqual((empty.area, empty.centroid_y, empty.zz),
                         (0, 0.0, 0.0))


class TestPrincipalMoments(TestCase):

    def test_axis_aligned(self):
        pm = principal_moments(3.0, 1.0, 0.0)
        assert_allclose([pm.i1, pm.i2, pm.angle], [3, 1, 0])
        pm = principal_moments(1.0, 3.0, 0.0)
        assert_allclose([pm.i1, pm.i2, pm.angle], [3, 1, 90],
                        err_msg='A stiffer vertical axis is the major axis.')

    def test_isotropic(self):
        pm = principal_moments(2.0, 2.0, 0.0)
        assert_allclose([pm.i1, pm.i2, pm.angle], [2, 2, 0])

    def test_inclined(self):
        pm = principal_moments(2.0, 2.0, 1.0)
        assert_allclose([pm.i1, pm.i2, pm.angle], [3, 1, -45])

    def test_invariants(self):
        rng = np.random.default_rng(7)
        for iz, iy, izy in rng.uniform(-1, 1, (20, 3)) * [5, 5, 2] + \
                [6, 6, 0]:
            pm = principal_moments(iz, iy, izy)
            assert_allclose(pm.i1 + pm.i2, iz + iy,
                            err_msg='The trace must be preserved.')
            self.assertGreaterEqual(pm.i1, max(iz, iy) - 1e-12)
            self.assertLessEqual(pm.i2, min(iz, iy) + 1e-12)
            self.assertTrue(-90 <= pm.angle <= 90)


class TestSectionProperties(TestCase):

    def test_zero_guards(self):
        props = section_properties(0.0, 0, 0, 0, 0, 0, 0, 0, 0, 0)
        self.assertEqual(props.radius_gyration.rz, 0.0)
        self.assertEqual(props.section_modulus.szt, 0.0)

        props = section_properties(10.0, 1, 1, 20.0, 5.0, 0, 2, 0, 1, 0)
        assert_allclose(
            [props.section_modulus.szt, props.section_modulus.szb,
             props.section_modulus.syt, props.section_modulus.syb],
            [10, 0, 5, 0],
            err_msg='A zero fibre distance must give a zero modulus.'
        )
        assert_allclose([props.radius_gyration.rz, props.radius_gyration.ry],
                        [np.sqrt(2), np.sqrt(0.5)])
