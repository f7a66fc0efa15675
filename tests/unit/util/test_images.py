"""Unit tests for image URL helpers."""

from shiki.util.images import optimized_image_url


class TestOptimizedImageUrl:
    """Tests for optimized_image_url."""

    def test_pexels_url_gets_size_and_compression(self):
        url = "https://images.pexels.com/photos/1/photo.jpeg?foo=bar"

        result = optimized_image_url(url, width=400, height=400)

        assert result == (
            "https://images.pexels.com/photos/1/photo.jpeg"
            "?w=400&h=400&auto=compress&cs=tinysrgb&dpr=2"
        )

    def test_width_only(self):
        result = optimized_image_url("https://images.pexels.com/p.jpg", width=800)
        assert result.startswith("https://images.pexels.com/p.jpg?w=800&auto=")

    def test_other_hosts_unchanged(self):
        url = "https://cdn.example.com/p.jpg?x=1"
        assert optimized_image_url(url, width=400) == url
