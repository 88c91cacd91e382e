import math
import random

from utils import format_currency

NEON_COLORS = [
    "#39ff14",  # neon green
    "#00eaff",  # neon blue
    "#ff00de",  # neon pink
    "#fff700",  # neon yellow
    "#ff073a",  # neon red
    "#00ffea",  # neon cyan
    "#ff9900",  # neon orange
    "#bc13fe",  # neon purple
]

DEFAULT_SEGMENTS = 12
NO_PRIZE_MESSAGE = "No prize, try again!"


def random_neon_color(rng=random):
    return rng.choice(NEON_COLORS)


def prize_count(num_segments):
    """Number of prize slots on a wheel of ``num_segments`` (floor of 60%)."""
    return num_segments * 3 // 5


def generate_wheel(num_segments=DEFAULT_SEGMENTS, rng=random):
    """Build a shuffled wheel of prize and blank segments.

    Prizes are worth $5 to $500 in steps of $5. Blanks carry an empty label
    and no value. Every segment gets its own random neon color.
    """
    num_prizes = prize_count(num_segments)
    num_blanks = num_segments - num_prizes

    segments = []
    for _ in range(num_prizes):
        value = rng.randrange(100) * 5 + 5
        segments.append({
            'label': format_currency(value),
            'value': value,
            'color': random_neon_color(rng),
        })
    for _ in range(num_blanks):
        segments.append({
            'label': "",
            'value': None,
            'color': random_neon_color(rng),
        })

    rng.shuffle(segments)
    return segments


def is_prize(segment):
    return bool(segment['value']) and bool(segment['label'])


def resolve_index(target, length):
    """Index of the segment under the pointer once the wheel stops.

    The wheel turns and the pointer stays put, so the landing segment is the
    target mirrored around the starting orientation.
    """
    return (length - target) % length


def result_message(segment):
    if is_prize(segment):
        return f"You won {format_currency(segment['value'])}!"
    return NO_PRIZE_MESSAGE


def slice_angle(length):
    return 360 / length


def target_rotation(target, length, extra_turns=5):
    """Clockwise rotation (degrees) that brings slice ``target`` under the pointer."""
    seg_angle = slice_angle(length)
    return 360 * extra_turns + (360 - target * seg_angle - seg_angle / 2)


def label_position(index, length, radius, ratio=0.6):
    """Label anchor for slice ``index`` relative to the wheel center.

    Uses the unrotated wheel frame: angle 0 points up at the pointer and
    angles grow clockwise, with screen y pointing down.
    """
    seg_angle = slice_angle(length)
    mid = math.radians(index * seg_angle + seg_angle / 2)
    return ratio * radius * math.sin(mid), -ratio * radius * math.cos(mid)
