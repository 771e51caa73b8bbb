TRANSLATIONS = {
    "label.title": "牌効率トレーナー",
    "label.hand": "手牌",
    "label.shanten": "向聴数",
    "label.shape": "和了形",
    "label.waits": "待ち",
    "label.ukeire": "受け入れ",
    "label.discard": "打牌",
    "label.accepted": "有効牌",
    "label.tenpai": "聴牌",
    "label.problem": "第{n}問",

    "shape.seven_pairs": "七対子",
    "shape.thirteen_orphans": "国士無双",
    "shape.standard": "一般形（4面子1雀頭）",
    "shape.incomplete": "和了形ではありません",

    "feedback.excellent": "正解！受け入れ最大（{ukeire}枚）の最善手です。",
    "feedback.good": "ほぼ正解です。最大受け入れはあと{loss}枚多かったです。",
    "feedback.suboptimal": "受け入れ枚数が最大ではありません（最大{best}枚 vs あなた{ukeire}枚）。ロス: {loss}枚",
    "feedback.bad": "シャンテン数が下がってしまいました（{best}向聴 → {shanten}向聴）。戻ってしまいます。",
    "feedback.best": "最善打牌: {tiles}",

    "defense.genbutsu": "素晴らしい！「現物（Genbutsu）」です。100%安全な牌を選べています。",
    "defense.suji": "良い判断です。「スジ」を通しています。両面待ちには当たりません。",
    "defense.kabe": "ナイス！「壁（カベ）」を利用して安全度を判断しました。",
    "defense.no_information": "情報が無い状況では字牌/端牌を切って様子見するのが安全策です。",
    "defense.mostly_dead": "3枚以上見えている字牌/端牌です。ほぼ安全です。",
    "defense.live_honor": "危険！リーチに対して「生牌（ションパイ）」の字牌は危険です。",
    "defense.push": "勝負！テンパイ維持のため危険牌を押しました。リスクに見合うリターンが必要です。",
    "defense.unsafe": "危険です！現物、スジ、壁など、より確実な安全牌を探しましょう。",
    "label.rating": "評価",
    "label.opponent_discards": "相手の捨て牌",
    "rating.excellent": "最善", "rating.great": "優秀", "rating.good": "良い",
    "rating.aggressive": "攻撃的", "rating.dangerous": "危険",

    "prompt.discard": "打牌を入力（例: 5m, 0p, 7z）、q で終了:",
    "prompt.invalid": "手牌にない牌です。",
    "msg.no_waits": "待ちなし",
    "msg.log_saved": "ログを保存しました: {path}",
    "msg.summary": "回答数 {n}: {ratings}",
    "msg.goodbye": "お疲れさまでした！",
}
