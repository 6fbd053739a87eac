"""Companion dialogue lines and their wrapping into the navigation box."""

from __future__ import annotations

from .constants import DIALOGUE_LINE_MAX_LENGTH, DIALOGUE_MAX_LENGTH, Prompt

_DIALOGUES: dict[Prompt, tuple[str, ...]] = {
    Prompt.EMPTY_TILE: (
        "Hmmm... This seems to be an empty tile. Let's keep going!",
        "Well... Don't just stop here. We still have things to do!",
        "Just keep moving, Just keep moving, Just keep moving moving moving!",
        "That's it? Have you lost stamina? Continue on our journey!",
        "Afraid? Fear is the path to the dark side. Keep Going!",
    ),
    Prompt.TREASURE_TILE: (
        "Ah! A treasure just for us! Thank the Lords!",
        "Wow... Somebody left behind their treasure. Welp, finders keepers...",
        "Did my birthday come early? Thank you for this treasure!",
        "And at last I see the light and it's like the sky is new! Thank you for the treasure!",
        "Ohhh so is this the Tallano Gold? #Unity",
    ),
    Prompt.ENEMY_TILE: (
        "Oh no! I think we were spotted",
        "Ah another guard! I think we can take them head-on!",
        "I guess this is another sparring partner for us...",
        "Oh, an enemy? We can do this all day!",
        "Keep your guards up. There's something lurking!",
    ),
    Prompt.NEW_UNLOCKED_TILE: (
        "We got 1 shard from that battle! We can now access the fast travel tile at this floor!",
        "Yahoo! We received 1 shard and unlocked the fast travel tile at this floor!",
        "Wow! What a fight! As a reward, we can now access the fast travel tile at this floor "
        "and received 1 shard!",
        "The enemy conceded! The fast travel tile is not blocked anymore! And we also got 1 shard!",
        "We can now access the fast travel at this floor! Oh by the way, we also got 1 shard",
    ),
    Prompt.BOSS_TILE: (
        "Uh oh... I think that is the boss!",
        "Even a boss is no match for us!",
        "Now is the time to be in the zone! A big bad boss just woke up!",
        "We will not back down from any fight, not even from a boss!",
        "We will not be bossed around by this big bad boss!",
    ),
    Prompt.LOCKED_TILE: (
        "This tile seems to be locked...",
        "The boss doesn't allow us to use this tile. We must defeat them.",
        "A boss is blocking this tile!",
        "Cannot interact with this tile... we might be missing something",
        "Oops... Will you really pass up a chance to defeat the boss?",
    ),
    Prompt.FINISHED_ELDEN_THRONE: (
        "Congratulations! We successfully beat The Elden Throne!",
        "Even the mighty beasts of Elden Throne can't stop us!",
        "At long last... The Elden Throne has now succumbed at our hands!",
        "Let's Gooo! We successfully cleared The Elden Throne!",
        "Is that all that The Elden Throne got? Weaklings...",
    ),
    Prompt.RH_FAST_TRAVEL: (
        "The game is afoot! Where do you wish to travel to?",
        "Ah a teleporter! Where shall we teleport to?",
        "I am excited for our journey... but to where?",
        "My spidey-senses are tingling! Where shall we explore?",
        "Where going on a trip on our favorite rocketship... but to where?",
    ),
    Prompt.RH_FAST_TRAVEL_LOCKED: (
        "Uh oh! We cannot travel to this area...",
        "Our fast travel device seems to be broken for this area.. Gather shards to fix it!",
        "We need more shards to travel to this area!",
        "This area is locked... We need more shards to unlock it!",
        "Oops! I think we lack shards...",
    ),
}


def load_dialogue(prompt: int, number: int) -> str:
    """Return dialogue ``number`` (1 to 5) for a prompt, padded with spaces."""
    try:
        options = _DIALOGUES[Prompt(prompt)]
    except (ValueError, KeyError):
        raise ValueError(f"no dialogue for prompt {prompt!r}") from None
    if not 1 <= number <= len(options):
        raise ValueError(f"dialogue number must be 1 to {len(options)}, got {number}")
    return options[number - 1].ljust(DIALOGUE_MAX_LENGTH)


def dialogue_line(line: int, dialogue: str) -> str:
    """One wrapped line of a dialogue, framed by a space on each side.

    A line whose first character is a space is shifted left by one so it
    does not start with a gap.
    """
    if line < 0:
        raise ValueError(f"line must not be negative, got {line}")
    width = DIALOGUE_LINE_MAX_LENGTH
    start = line * width
    chunk = dialogue[start : start + width]
    if chunk.startswith(" "):
        chunk = dialogue[start + 1 : start + width] + " "
    return f" {chunk.ljust(width)[:width]} "