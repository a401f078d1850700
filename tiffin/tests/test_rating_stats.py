import unittest
from tiffin.domain.Seller import RatingStats
from tiffin.logic.ratings.stats import compute_rating_stats


class TestRatingStats(unittest.TestCase):

    def test_no_ratings(self):
        self.assertEqual(compute_rating_stats([]), RatingStats())

    def test_average_and_breakdown(self):
        stats = compute_rating_stats([5, 4, 4, 3])
        self.assertEqual(stats.total_ratings, 4)
        self.assertEqual(stats.average_rating, 4.0)
        self.assertEqual(stats.rating_breakdown, {1: 0, 2: 0, 3: 1, 4: 2, 5: 1})

    def test_average_rounds_half_up(self):
        # 17 / 4 = 4.25
        self.assertEqual(compute_rating_stats([5, 4, 4, 4]).average_rating, 4.3)
        self.assertEqual(compute_rating_stats([5, 5, 4]).average_rating, 4.7)

    def test_out_of_range(self):
        with self.assertRaises(ValueError):
            compute_rating_stats([5, 6])

    def test_non_integer_ratings_rejected(self):
        for bad in (True, 4.0, "5"):
            with self.assertRaises(ValueError):
                compute_rating_stats([5, bad])
