TRANSLATIONS = {
    "label.title": "Mahjong Efficiency Trainer",
    "label.hand": "Hand",
    "label.shanten": "Shanten",
    "label.shape": "Shape",
    "label.waits": "Waits",
    "label.ukeire": "Ukeire",
    "label.discard": "Discard",
    "label.accepted": "Accepted tiles",
    "label.tenpai": "Tenpai",
    "label.problem": "Problem {n}",

    "shape.seven_pairs": "Seven pairs",
    "shape.thirteen_orphans": "Thirteen orphans",
    "shape.standard": "Standard (4 melds + pair)",
    "shape.incomplete": "Not a winning hand",

    "feedback.excellent": "Correct! Maximum acceptance ({ukeire} tiles).",
    "feedback.good": "Almost. The best discard accepts {loss} more tile(s).",
    "feedback.suboptimal": "Acceptance is not maximal (best {best} vs yours {ukeire}). Loss: {loss} tiles.",
    "feedback.bad": "Shanten went back ({best} → {shanten}).",
    "feedback.best": "Best discard(s): {tiles}",

    "defense.genbutsu": "Excellent! Genbutsu: the opponent already discarded it, so it is 100% safe.",
    "defense.suji": "Good call. It is suji, so it cannot be a ryanmen wait.",
    "defense.kabe": "Nice! You used a wall (kabe) to judge its safety.",
    "defense.no_information": "With no information yet, an honor or terminal is the safe way to wait and see.",
    "defense.mostly_dead": "Three or more copies are visible. Nearly safe.",
    "defense.live_honor": "Danger! A live honor with no copies out is risky against riichi.",
    "defense.push": "Push! You kept tenpai with a dangerous tile. Make sure the hand is worth it.",
    "defense.unsafe": "Dangerous! Look for genbutsu, suji or kabe first.",
    "label.rating": "Rating",
    "label.opponent_discards": "Opponent discards",
    "rating.excellent": "Excellent", "rating.great": "Great", "rating.good": "Good",
    "rating.aggressive": "Aggressive", "rating.dangerous": "Dangerous",

    "prompt.discard": "Discard (e.g. 5m, 0p, 7z), 'q' to quit:",
    "prompt.invalid": "Not a tile in your hand.",
    "msg.no_waits": "No waits.",
    "msg.log_saved": "Drill log saved: {path}",
    "msg.summary": "Answered {n}: {ratings}",
    "msg.goodbye": "Bye!",
}
