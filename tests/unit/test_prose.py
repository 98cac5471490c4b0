"""Tests for the prose colorizer."""

import random
import re

from transmute.draw import Draw
from transmute.prose import ACCENT_COLOR, BASE_COLORS, RARE_COLOR, colorize_prose, word_color

_SPAN = re.compile(r'<span style="color: (#[0-9A-F]{6}); transition: color 0\.3s ease-in-out;">(.*?)</span>')


class TestColorizeProse:
    def test_empty_text(self):
        assert colorize_prose("") == ""

    def test_every_word_wrapped(self):
        markup = colorize_prose("buy milk today", rng=random.Random(1))
        assert [word for _, word in _SPAN.findall(markup)] == ["buy", "milk", "today"]

    def test_whitespace_preserved(self):
        markup = colorize_prose("a  b\nc", rng=random.Random(1))
        stripped = _SPAN.sub(lambda m: m.group(2), markup)
        assert stripped == "a&nbsp;&nbsp;b<br/>c"

    def test_words_escaped(self):
        markup = colorize_prose("<b>&", rng=random.Random(1))
        assert "&lt;b&gt;&amp;" in markup

    def test_same_rng_same_output(self):
        assert colorize_prose("x y z", random.Random(4)) == colorize_prose("x y z", random.Random(4))


class TestWordColor:
    def test_colour_weights(self):
        draw = Draw(random.Random(12))
        counts = {}
        for _ in range(5000):
            color = word_color(draw)
            counts[color] = counts.get(color, 0) + 1
        assert set(counts) <= {RARE_COLOR, ACCENT_COLOR, *BASE_COLORS}
        assert counts[RARE_COLOR] < counts[ACCENT_COLOR]
        assert 1200 < counts[ACCENT_COLOR] < 1800
        assert sum(counts.get(c, 0) for c in BASE_COLORS) > 3000
