"""ルールが参照する静的テーブル。

辞書は「誤/非推奨表記 -> 推奨表記」の順で並べる。同じ位置で重なった場合は
長いキーが優先されるため、短いキーと長いキーを併記してよい。
"""
from __future__ import annotations

import re
from typing import Dict, List, Tuple

# ---------------------------------------------------------------------------
# 文体・文末
# ---------------------------------------------------------------------------

KEIGO_ENDING_RE = re.compile(r"(です|ます)$")
JOUTAI_ENDING_RES = [
    re.compile(r"である$"),
    re.compile(r"ている$"),
    re.compile(r"てある$"),
    re.compile(r"[^し]た$"),
    re.compile(r"[^ん]だ$"),
]

SENTENCE_ENDING_RE = re.compile(r"(です|ます|である|だった|でした|ました|だ|た)[。！？!?]?$")

ENDING_VARIATIONS: Dict[str, List[str]] = {
    "です": ["である", "だ", "になります", "となります"],
    "ます": ["る", "である", "だ", "になる", "となる"],
    "である": ["です", "だ", "になる", "となる"],
    "だ": ["です", "である", "になる", "となる"],
    "ました": ["た", "だった", "でした"],
    "た": ["ました", "だった", "でした"],
    "でした": ["ました", "た", "だった"],
    "だった": ["でした", "た", "ました"],
}
DEFAULT_ENDING_VARIATIONS = ["文末表現を変化させてください"]

# ---------------------------------------------------------------------------
# ら抜き言葉
# ---------------------------------------------------------------------------

RA_NUKI_PATTERNS: Dict[str, str] = {
    "食べれる": "食べられる",
    "食べれた": "食べられた",
    "食べれない": "食べられない",
    "食べれます": "食べられます",
    "食べれません": "食べられません",
    "見れる": "見られる",
    "見れた": "見られた",
    "見れない": "見られない",
    "見れます": "見られます",
    "見れません": "見られません",
    "起きれる": "起きられる",
    "起きれた": "起きられた",
    "起きれない": "起きられない",
    "起きれます": "起きられます",
    "考えれる": "考えられる",
    "考えれた": "考えられた",
    "考えれない": "考えられない",
    "考えれます": "考えられます",
    "出れる": "出られる",
    "出れた": "出られた",
    "出れない": "出られない",
    "寝れる": "寝られる",
    "寝れた": "寝られた",
    "寝れない": "寝られない",
    "着れる": "着られる",
    "着れた": "着られた",
    "着れない": "着られない",
    "居れる": "居られる",
    "いれる": "いられる",
    "受けれる": "受けられる",
    "受けれた": "受けられた",
    "信じれる": "信じられる",
    "信じれた": "信じられた",
    "感じれる": "感じられる",
    "感じれた": "感じられた",
    "落ちれる": "落ちられる",
    "落ちれた": "落ちられた",
    "生きれる": "生きられる",
    "生きれた": "生きられた",
    "降りれる": "降りられる",
    "降りれた": "降りられた",
    "始めれる": "始められる",
    "始めれた": "始められた",
    "決めれる": "決められる",
    "決めれた": "決められた",
    "変えれる": "変えられる",
    "変えれた": "変えられた",
    "止めれる": "止められる",
    "止めれた": "止められた",
    "覚えれる": "覚えられる",
    "覚えれた": "覚えられた",
    "教えれる": "教えられる",
    "教えれた": "教えられた",
    "逃げれる": "逃げられる",
    "逃げれた": "逃げられた",
    "開けれる": "開けられる",
    "開けれた": "開けられた",
    "閉めれる": "閉められる",
    "閉めれた": "閉められた",
}

RA_NUKI_VERB_RE = re.compile(r"^(.+[えいけげせてねべめれ])れ(る|た|ない|ます|ません)$")

# ---------------------------------------------------------------------------
# 二重否定・弱い表現
# ---------------------------------------------------------------------------

# (パターン, 提案)
DOUBLE_NEGATION_PATTERNS: List[Tuple[str, str]] = [
    ("ないわけではない", "肯定表現に書き換えることを検討してください（例：「ある」「する」など）"),
    ("ないことはない", "肯定表現に書き換えることを検討してください（例：「ある」「できる」など）"),
    ("なくはない", "肯定表現に書き換えることを検討してください（例：「ある」など）"),
    ("ないとは言えない", "肯定表現に書き換えることを検討してください（例：「あり得る」「可能性がある」など）"),
    ("ないではいられない", "「せずにはいられない」や肯定的な表現に書き換えることを検討してください"),
    ("ずにはいられない", "肯定的な表現に書き換えることを検討してください"),
    ("ないとも限らない", "「あり得る」「可能性がある」などの表現を検討してください"),
    ("ないでもない", "肯定表現に書き換えることを検討してください"),
]

# (正規表現, 表示名, 推奨表現, レベル)
WEAK_EXPRESSION_PATTERNS: List[Tuple[str, str, str, str]] = [
    (r"かもしれない", "かもしれない", "可能性がある", "normal"),
    (r"かもしれません", "かもしれません", "可能性があります", "normal"),
    (r"と思われる", "と思われる", "と考えられる", "normal"),
    (r"と思われます", "と思われます", "と考えられます", "normal"),
    (r"ような気がする", "ような気がする", "と推測される", "normal"),
    (r"ような気がします", "ような気がします", "と推測されます", "normal"),
    (r"気がする", "気がする", "と感じる", "strict"),
    (r"と思う(?!われ)", "と思う", "と考える", "strict"),
    (r"と思います(?!が)", "と思います", "と考えます", "strict"),
    (r"多分", "多分", "おそらく", "loose"),
    (r"たぶん", "たぶん", "おそらく", "loose"),
    (r"なんとなく", "なんとなく", "具体的な理由を述べる", "strict"),
    (r"一応", "一応", "念のため", "loose"),
]

# レベルごとに含めるパターンのレベル
WEAK_EXPRESSION_LEVEL_FILTER: Dict[str, Tuple[str, ...]] = {
    "strict": ("strict", "normal", "loose"),
    "normal": ("normal", "loose"),
    "loose": ("loose",),
}

# ---------------------------------------------------------------------------
# 接続詞
# ---------------------------------------------------------------------------

COMMON_CONJUNCTIONS: List[str] = [
    "しかし", "また", "そして", "それで", "だから", "ところが", "すると", "それから", "さらに",
    "ただし", "なお", "ちなみに", "つまり", "要するに", "したがって", "ゆえに", "なぜなら",
]

CONJUNCTION_ALTERNATIVES: Dict[str, List[str]] = {
    "しかし": ["ところが", "けれども", "一方で"],
    "また": ["さらに", "加えて", "そのうえ"],
    "そして": ["それから", "さらに", "加えて"],
    "だから": ["したがって", "よって", "そのため"],
    "つまり": ["要するに", "言い換えれば", "すなわち"],
}
DEFAULT_CONJUNCTION_ALTERNATIVES = ["別の接続詞"]

# 長文の分割候補として探す接続詞
SPLIT_CONJUNCTIONS: List[str] = ["そして", "また", "しかし", "したがって", "なお", "ただし"]

# 誤用パターン: 表現 -> (修正例, 接続詞, 説明)
CONJUNCTION_MISUSE_PATTERNS: Dict[str, Tuple[str, str, str]] = {
    "晴れた。しかし、外出した": (
        "晴れた。そこで、外出した",
        "しかし",
        "「しかし」は逆接の接続詞です。天気と外出は順接の関係では「そこで」「だから」が適切です",
    ),
    "忙しい。だから、暇だ": (
        "忙しい。しかし、暇だ",
        "だから",
        "「だから」は順接の接続詞です。矛盾する内容には「しかし」「けれども」が適切です",
    ),
    "雨だ。だから、傘を持たない": (
        "雨だ。しかし、傘を持たない",
        "だから",
        "「だから」は順接の接続詞です。逆の行動には「しかし」「けれども」が適切です",
    ),
    "成功した。しかし、嬉しい": (
        "成功した。だから、嬉しい",
        "しかし",
        "「しかし」は逆接の接続詞です。成功と喜びは順接の関係では「だから」「そのため」が適切です",
    ),
}

# ---------------------------------------------------------------------------
# 表記（漢字の開き・送り仮名・表記ゆれ・長音）
# ---------------------------------------------------------------------------

KANJI_OPENING: Dict[str, str] = {
    "下さい": "ください",
    "頂く": "いただく",
    "頂きます": "いただきます",
    "頂ける": "いただける",
    "頂ければ": "いただければ",
    "致します": "いたします",
    "致しました": "いたしました",
    "参ります": "まいります",
    "参りました": "まいりました",
    "出来る": "できる",
    "出来ます": "できます",
    "出来ない": "できない",
    "出来ません": "できません",
    "出来た": "できた",
    "出来ました": "できました",
    "但し": "ただし",
    "又は": "または",
    "及び": "および",
    "並びに": "ならびに",
    "若しくは": "もしくは",
    "更に": "さらに",
    "即ち": "すなわち",
    "従って": "したがって",
    "予め": "あらかじめ",
    "概ね": "おおむね",
    "既に": "すでに",
    "直ぐ": "すぐ",
    "未だ": "いまだ",
    "殆ど": "ほとんど",
    "僅か": "わずか",
    "漸く": "ようやく",
    "事": "こと",
    "物": "もの",
    "所": "ところ",
    "時": "とき",
    "為": "ため",
    "筈": "はず",
    "訳": "わけ",
    "様": "よう",
    "有難う": "ありがとう",
    "有難うございます": "ありがとうございます",
    "御座います": "ございます",
    "御願い": "お願い",
    "宜しく": "よろしく",
    "宜しくお願い": "よろしくお願い",
    "沢山": "たくさん",
    "色々": "いろいろ",
    "様々": "さまざま",
    "是非": "ぜひ",
    "丁度": "ちょうど",
    "何故": "なぜ",
    "尚": "なお",
    "敢えて": "あえて",
}

OKURIGANA_VARIANTS: Dict[str, str] = {
    "表わす": "表す",
    "表わし": "表し",
    "表わせ": "表せ",
    "表わそ": "表そ",
    "現わす": "現す",
    "現わし": "現し",
    "現わせ": "現せ",
    "現わそ": "現そ",
    "行なう": "行う",
    "行ない": "行い",
    "行なえ": "行え",
    "行なお": "行お",
    "行なわ": "行わ",
    "行なっ": "行っ",
    "おこなう": "行う",
    "おこない": "行い",
    "おこなえ": "行え",
    "おこなっ": "行っ",
    "著わす": "著す",
    "著わし": "著し",
    "断わる": "断る",
    "断わり": "断り",
    "断わっ": "断っ",
    "当る": "当たる",
    "当り": "当たり",
    "当れ": "当たれ",
    "落す": "落とす",
    "落し": "落とし",
    "果す": "果たす",
    "果し": "果たし",
    "起る": "起こる",
    "起り": "起こり",
    "終る": "終わる",
    "終り": "終わり",
    "終れ": "終われ",
    "変る": "変わる",
    "変り": "変わり",
    "変れ": "変われ",
    "代る": "代わる",
    "代り": "代わり",
    "生れる": "生まれる",
    "生れ": "生まれ",
    "答る": "答える",
    "捕える": "捕らえる",
    "捕え": "捕らえ",
    "戴く": "いただく",
    "戴き": "いただき",
    "戴け": "いただけ",
    "戴い": "いただい",
    "頂く": "いただく",
    "頂き": "いただき",
    "頂け": "いただけ",
    "頂い": "いただい",
    "下さい": "ください",
    "下さる": "くださる",
    "下され": "くだされ",
    "下さっ": "くださっ",
    "致す": "いたす",
    "致し": "いたし",
    "致せ": "いたせ",
    "致そ": "いたそ",
    "著るしい": "著しい",
    "著るしく": "著しく",
    "危い": "危ない",
    "危く": "危なく",
    "少い": "少ない",
    "少く": "少なく",
    "売上げ": "売り上げ",
    "取扱い": "取り扱い",
    "受付け": "受け付け",
    "申込み": "申し込み",
    "引越し": "引っ越し",
    "買物": "買い物",
    "読物": "読み物",
    "贈物": "贈り物",
    "届出": "届け出",
    "届出る": "届け出る",
}

ORTHOGRAPHY_VARIANTS: Dict[str, str] = {
    "出来る": "できる",
    "出来ます": "できます",
    "出来ない": "できない",
    "出来ません": "できません",
    "出来た": "できた",
    "出来ました": "できました",
    "出来れば": "できれば",
    "出来て": "できて",
    "下さい": "ください",
    "下さる": "くださる",
    "下さった": "くださった",
    "下さって": "くださって",
    "下さいます": "くださいます",
    "致します": "いたします",
    "致しました": "いたしました",
    "致す": "いたす",
    "致しまして": "いたしまして",
    "頂く": "いただく",
    "頂きます": "いただきます",
    "頂ける": "いただける",
    "頂ければ": "いただければ",
    "頂き": "いただき",
    "頂いた": "いただいた",
    "頂いて": "いただいて",
    "有る": "ある",
    "有り": "あり",
    "有ります": "あります",
    "有った": "あった",
    "有れば": "あれば",
    "無い": "ない",
    "無く": "なく",
    "無かった": "なかった",
    "無ければ": "なければ",
    "居る": "いる",
    "居ます": "います",
    "居ない": "いない",
    "居た": "いた",
    "成る": "なる",
    "成ります": "なります",
    "成った": "なった",
    "置く": "おく",
    "置き": "おき",
    "置いて": "おいて",
    "見る": "みる",
    "見て": "みて",
    "又": "また",
    "但し": "ただし",
    "尚": "なお",
    "及び": "および",
    "並びに": "ならびに",
    "若しくは": "もしくは",
    "或いは": "あるいは",
    "即ち": "すなわち",
    "従って": "したがって",
    "因みに": "ちなみに",
    "更に": "さらに",
    "殆ど": "ほとんど",
    "僅か": "わずか",
    "概ね": "おおむね",
    "予め": "あらかじめ",
    "既に": "すでに",
    "直ぐ": "すぐ",
    "未だ": "いまだ",
    "漸く": "ようやく",
    "事": "こと",
    "物": "もの",
    "所": "ところ",
    "時": "とき",
    "為": "ため",
    "筈": "はず",
    "訳": "わけ",
    "様": "よう",
    "宜しく": "よろしく",
    "御願い": "お願い",
    "御座います": "ございます",
    "有難う": "ありがとう",
    "有難うございます": "ありがとうございます",
    "是非": "ぜひ",
    "沢山": "たくさん",
    "色々": "いろいろ",
    "様々": "さまざま",
    "丁度": "ちょうど",
    "何故": "なぜ",
    "敢えて": "あえて",
}

KATAKANA_CHOUON: Dict[str, str] = {
    "サーバ": "サーバー",
    "コンピュータ": "コンピューター",
    "ユーザ": "ユーザー",
    "ブラウザ": "ブラウザー",
    "フォルダ": "フォルダー",
    "プリンタ": "プリンター",
    "スキャナ": "スキャナー",
    "モニタ": "モニター",
    "ルータ": "ルーター",
    "コントローラ": "コントローラー",
    "マネージャ": "マネージャー",
    "エンジニア": "エンジニアー",
    "ドライバ": "ドライバー",
    "メモリ": "メモリー",
    "カテゴリ": "カテゴリー",
    "エントリ": "エントリー",
    "ディレクトリ": "ディレクトリー",
    "ライブラリ": "ライブラリー",
    "レジストリ": "レジストリー",
    "ヒストリ": "ヒストリー",
    "ストーリ": "ストーリー",
    "ファクトリ": "ファクトリー",
    "インベントリ": "インベントリー",
    "ギャラリ": "ギャラリー",
    "バッテリ": "バッテリー",
    "プロパティ": "プロパティー",
    "セキュリティ": "セキュリティー",
    "ユーティリティ": "ユーティリティー",
    "アクセサリ": "アクセサリー",
    "スケジューラ": "スケジューラー",
    "ハンドラ": "ハンドラー",
    "コンパイラ": "コンパイラー",
    "インタプリタ": "インタプリター",
    "デバッガ": "デバッガー",
    "エディタ": "エディター",
    "クリエイタ": "クリエイター",
    "オペレータ": "オペレーター",
    "インジケータ": "インジケーター",
    "イテレータ": "イテレーター",
    "ジェネレータ": "ジェネレーター",
    "シミュレータ": "シミュレーター",
    "エミュレータ": "エミュレーター",
    "アクセラレータ": "アクセラレーター",
    "レギュレータ": "レギュレーター",
    "センサ": "センサー",
    "プロセッサ": "プロセッサー",
    "トランジスタ": "トランジスター",
    "レジスタ": "レジスター",
    "フィルタ": "フィルター",
    "アダプタ": "アダプター",
    "コネクタ": "コネクター",
    "コンバータ": "コンバーター",
    "インバータ": "インバーター",
    "スピーカ": "スピーカー",
    "プレイヤ": "プレイヤー",
    "レイヤ": "レイヤー",
    "パラメタ": "パラメーター",
    "パラメータ": "パラメーター",
    "カウンタ": "カウンター",
    "ポインタ": "ポインター",
    "キャラクタ": "キャラクター",
    "セパレータ": "セパレーター",
    "デリミタ": "デリミター",
    "マーカ": "マーカー",
    "トリガ": "トリガー",
    "スライダ": "スライダー",
    "ホルダ": "ホルダー",
    "バインダ": "バインダー",
    "ローダ": "ローダー",
    "リーダ": "リーダー",
    "ライタ": "ライター",
    "ヘルパ": "ヘルパー",
    "ワーカ": "ワーカー",
    "パーサ": "パーサー",
    "レンダラ": "レンダラー",
    "ビルダ": "ビルダー",
    "ランナ": "ランナー",
    "プランナ": "プランナー",
    "デザイナ": "デザイナー",
    "コンテナ": "コンテナー",
    "リスナ": "リスナー",
    "オーナ": "オーナー",
    "パートナ": "パートナー",
    "メンバ": "メンバー",
    "ナンバ": "ナンバー",
    "メータ": "メーター",
    "データ": "データー",
    "メイル": "メール",
    "Ｅメイル": "Eメール",
    "イーメイル": "イーメール",
    "デフォルトー": "デフォルト",
    "スケールー": "スケール",
    "インストールー": "インストール",
    "アンインストールー": "アンインストール",
}

# 長音なしが慣用となっている語
KATAKANA_EXCEPTIONS = frozenset([
    "データ", "エンジニア", "アイデア", "エリア", "メディア",
    "クリア", "インテリア", "フロンティア", "ボランティア", "キャリア",
])

# ---------------------------------------------------------------------------
# 冗長・重複・同音異義語・敬語など（フレーズ表）
# ---------------------------------------------------------------------------

REDUNDANT_EXPRESSIONS: Dict[str, str] = {
    "馬から落馬": "落馬",
    "後で後悔": "後悔",
    "一番最初": "最初",
    "各々それぞれ": "それぞれ",
    "まず最初に": "最初に",
    "過半数を超える": "過半数",
    "元旦の朝": "元旦",
    "炎天下の下": "炎天下",
    "頭頂部の頭": "頭頂部",
    "射程距離": "射程",
    "製造メーカー": "メーカー",
    "最後の切り札": "切り札",
    "思いがけないハプニング": "ハプニング",
    "返事を返す": "返事をする",
    "連日続く": "連日",
    "日本に来日": "来日",
    "あらかじめ予約": "予約",
    "必ず必要": "必要",
    "全て全員": "全員",
    "今現在": "現在",
}

# 表現 -> (修正候補, 重複している要素)
TAUTOLOGY_PATTERNS: Dict[str, Tuple[List[str], str]] = {
    "頭痛が痛い": (["頭が痛い", "頭痛がする"], "「頭」と「痛い」"),
    "違和感を感じる": (["違和感がある", "違和感を覚える"], "「感」"),
    "被害を被る": (["被害を受ける", "被害にあう"], "「被」"),
    "犯罪を犯す": (["罪を犯す", "犯罪を行う"], "「犯」"),
    "危険が危ない": (["危険がある", "危ない"], "「危」"),
    "心配が心配": (["心配がある", "心配だ"], "「心配が心配」"),
    "不安が不安": (["不安がある", "不安だ"], "「不安が不安」"),
    "問題が問題": (["問題がある", "問題だ"], "「問題が問題」"),
    "歌を歌う": (["歌う", "歌を披露する"], "「歌」"),
    "踊りを踊る": (["踊る", "踊りを披露する"], "「踊」"),
    "話を話す": (["話す", "話をする"], "「話」"),
    "旅行を旅する": (["旅行する", "旅をする"], "「旅行を旅する」"),
    "返事を返す": (["返事をする", "答える"], "「返事を返す」"),
    "挨拶を挨拶する": (["挨拶をする", "挨拶する"], "「挨拶を挨拶する」"),
    "過去を振り返る": (["過去を思い出す", "振り返る"], "「過去を振り返る」"),
    "日本に来日": (["来日する", "日本に来る"], "「日」"),
    "アメリカに渡米": (["渡米する", "アメリカに行く"], "「米」"),
    "電車に乗車": (["乗車する", "電車に乗る"], "「車」"),
    "車から下車": (["下車する", "車から降りる"], "「車」"),
}

SAHEN_NOUNS: List[str] = ["勉強", "料理", "掃除", "洗濯", "散歩", "運動", "買物", "買い物", "仕事", "練習"]
SAHEN_VERB_PATTERNS: Dict[str, str] = {}
for _noun in SAHEN_NOUNS:
    SAHEN_VERB_PATTERNS[_noun + "をする"] = _noun + "する"
    SAHEN_VERB_PATTERNS[_noun + "をし"] = _noun + "し"
del _noun

# 表現 -> (修正候補, 説明)
HOMOPHONE_PATTERNS: Dict[str, Tuple[List[str], str]] = {
    "意志が低い": (["意識が低い", "志が低い"], "「意志」は決意や意図、「意識」は認識や自覚を意味します"),
    "異動の制約": (["移動の制約"], "物理的な移動には「移動」、人事には「異動」を使用します"),
    "移動の制約": (["異動の制約"], "人事異動の文脈では「異動」を使用します"),
    "移動の辞令": (["異動の辞令"], "人事関連には「異動」を使用します"),
    "以外に多い": (["意外に多い"], "予想外を表す場合は「意外」を使用します"),
    "意外の人": (["以外の人"], "〜を除いてを表す場合は「以外」を使用します"),
    "過程が良い": (["家庭が良い"], "家族関係を表す場合は「家庭」を使用します"),
    "家庭で作る": (["過程で作る"], "プロセスを表す場合は「過程」を使用します"),
}

DOUBLE_HONORIFIC_PATTERNS: Dict[str, str] = {
    "おっしゃられ": "おっしゃい",
    "ご覧になられ": "ご覧にな",
    "お見えになられ": "お見えにな",
    "お越しになられ": "お越しにな",
    "お帰りになられ": "お帰りにな",
    "お召し上がりになられ": "お召し上がりにな",
    "ご利用になられ": "ご利用にな",
    "お読みになられ": "お読みにな",
    "お書きになられ": "お書きにな",
    "お聞きになられ": "お聞きにな",
}

HONORIFIC_MISUSE_PATTERNS: Dict[str, str] = {
    "お客様がおっしゃられました": "お客様がおっしゃいました",
    "ご覧になられる": "ご覧になる",
    "部長がお見えになられる": "部長がお見えになる",
    "お越しになられました": "お越しになりました",
    "お帰りになられました": "お帰りになりました",
}

TWISTED_SENTENCE_PATTERNS: Dict[str, Tuple[str, str]] = {
    "私の夢は医者になりたいです": ("私の夢は医者になることです", "主語「夢は」と述語「なりたい」が対応していません"),
    "彼の特技は絵を上手です": ("彼の特技は絵を描くことです", "主語「特技は」と述語「上手です」が対応していません"),
    "私の趣味は映画を見たいです": ("私の趣味は映画を見ることです", "主語「趣味は」と述語「見たい」が対応していません"),
    "私の目標は成功したいです": ("私の目標は成功することです", "主語「目標は」と述語「したい」が対応していません"),
    "私の希望は合格したいです": ("私の希望は合格することです", "主語「希望は」と述語「したい」が対応していません"),
}

TWISTED_SENTENCE_RES: List[Tuple[re.Pattern, str]] = [
    (
        re.compile(r"私の(夢|目標|希望|願い)は[^。]*たいです"),
        "「〜は」と「〜たいです」が対応していません。「〜は〜ことです」の形式を検討してください",
    ),
    (
        re.compile(r"[^の]の(特技|得意|長所)は[^を]*を[^。]*です"),
        "「〜は」と述語が対応していません。文の構造を見直してください",
    ),
]

# (副詞, 呼応する文末, 呼応しない文末, 正しい例)
ADVERB_AGREEMENT_RULES: List[Tuple[str, Tuple[str, ...], Tuple[str, ...], str]] = [
    ("決して", ("ない", "ません", "なかった", "ませんでした"), ("ます",), "決して行きません"),
    ("全く", ("ない", "ません", "なかった", "ませんでした"), ("ます",), "全く分かりません"),
    ("必ずしも", ("ない", "ません", "とは限らない", "わけではない"), ("ます", "です"), "必ずしも正しいとは限らない"),
    ("たぶん", ("だろう", "でしょう", "かもしれない", "と思う"), ("ません",), "たぶん行くでしょう"),
    ("おそらく", ("だろう", "でしょう", "かもしれない", "と思われる"), ("ません",), "おそらく正しいでしょう"),
    ("もし", ("なら", "たら", "ば", "と"), ("ない",), "もし晴れたら行きます"),
]

_SIZE_COLOR = "修飾語は「大きさ」→「色」の順序が自然です"
_SUBJECTIVE_FIRST = "主観的な修飾語は客観的な修飾語の前に置くのが自然です"

# 表現 -> (自然な語順, 説明)
MODIFIER_ORDER_PATTERNS: Dict[str, Tuple[str, str]] = {
    "赤い大きな": ("大きな赤い", _SIZE_COLOR),
    "青い小さな": ("小さな青い", _SIZE_COLOR),
    "白い大きな": ("大きな白い", _SIZE_COLOR),
    "黒い小さな": ("小さな黒い", _SIZE_COLOR),
    "古い素敵な": ("素敵な古い", _SUBJECTIVE_FIRST),
    "新しい素晴らしい": ("素晴らしい新しい", _SUBJECTIVE_FIRST),
}

AMBIGUOUS_MODIFIER_PATTERNS: Dict[str, str] = {
    "美しい女性の写真": "「美しい」が「女性」と「写真」のどちらを修飾するか曖昧です",
    "大きな子供の靴": "「大きな」が「子供」と「靴」のどちらを修飾するか曖昧です",
    "新しい社員の机": "「新しい」が「社員」と「机」のどちらを修飾するか曖昧です",
}

AMBIGUOUS_DEMONSTRATIVE_PATTERNS: Dict[str, str] = {
    "それは問題だ。しかし、それも": "複数の「それ」が異なる対象を指している可能性があります",
    "これについては、あれを参照": "「これ」「あれ」の指す対象が不明確です",
    "それについて、それを": "「それ」が繰り返し使用され、指す対象が曖昧です",
    "あれは重要だ。あれも": "複数の「あれ」の指す対象を明確にしてください",
    "これが正しい。これは": "「これ」が繰り返し使用され、指す対象が曖昧です",
}

LEADING_DEMONSTRATIVE_RES: List[re.Pattern] = [
    re.compile(r"^それは[^。]*問題"),
    re.compile(r"^これは[^。]*重要"),
    re.compile(r"^あれは[^。]*必要"),
]
LEADING_DEMONSTRATIVE_NOTE = "文頭の指示語には先行詞がありません。具体的な名詞を使用することを検討してください"

PASSIVE_RES: List[re.Pattern] = [
    re.compile(r"れた[。、]"),
    re.compile(r"られた[。、]"),
    re.compile(r"された[。、]"),
    re.compile(r"されました[。、]"),
    re.compile(r"れました[。、]"),
    re.compile(r"られました[。、]"),
]
CONSECUTIVE_PASSIVE_RE = re.compile(r"[^。]*された[。][^。]*された[。][^。]*された[。]")

NOUN_CHAIN_PATTERNS: Dict[str, str] = {
    "東京都渋谷区松濤一丁目住所": "「東京都渋谷区松濤一丁目の住所」のように助詞を挿入",
    "品質管理体制強化計画書": "「品質管理体制の強化計画書」のように分割",
    "情報システム管理者連絡先": "「情報システム管理者の連絡先」のように分割",
    "顧客満足度向上施策検討会議": "「顧客満足度向上のための施策検討会議」のように分割",
}
NOUN_CHAIN_DEFAULT_NOTE = "名詞の間に助詞を挿入して読みやすくしてください"

# ---------------------------------------------------------------------------
# 文字種・記号
# ---------------------------------------------------------------------------

# (全角, 半角, 名称)
SYMBOL_PAIRS: List[Tuple[str, str, str]] = [
    ("：", ":", "コロン"),
    ("；", ";", "セミコロン"),
    ("／", "/", "スラッシュ"),
    ("＼", "\\", "バックスラッシュ"),
    ("？", "?", "疑問符"),
    ("！", "!", "感嘆符"),
    ("＆", "&", "アンパサンド"),
    ("＝", "=", "イコール"),
    ("＋", "+", "プラス"),
    ("＊", "*", "アスタリスク"),
    ("＃", "#", "シャープ"),
    ("＄", "$", "ドル記号"),
    ("％", "%", "パーセント"),
    ("＠", "@", "アットマーク"),
]

KANJI_NUMERAL_RE = re.compile(r"[〇零一壱二弐三参四五六七八九十百千万億]+")
ARABIC_NUMERAL_RE = re.compile(r"[0-9０-９]+")
KANJI_TO_ARABIC: Dict[str, str] = {
    "〇": "0", "零": "0",
    "一": "1", "壱": "1",
    "二": "2", "弐": "2",
    "三": "3", "参": "3",
    "四": "4", "五": "5", "六": "6", "七": "7", "八": "8", "九": "9",
}
ARABIC_TO_KANJI = "〇一二三四五六七八九"

# (形式キー, 正規表現, 表示名)
DATE_FORMATS: List[Tuple[str, re.Pattern, str]] = [
    (
        "kanji",
        re.compile(r"[0-9]{4}年[0-9]{1,2}月[0-9]{1,2}日|[0-9]{4}年[0-9]{1,2}月|[0-9]{1,2}月[0-9]{1,2}日"),
        "漢字形式（例: 2025年12月11日）",
    ),
    ("slash", re.compile(r"[0-9]{4}/[0-9]{1,2}/[0-9]{1,2}|[0-9]{4}/[0-9]{1,2}"), "スラッシュ形式（例: 2025/12/11）"),
    ("hyphen", re.compile(r"[0-9]{4}-[0-9]{1,2}-[0-9]{1,2}|[0-9]{4}-[0-9]{1,2}"), "ハイフン形式（例: 2025-12-11）"),
    (
        "era",
        re.compile(r"(令和|平成|昭和|大正|明治)[0-9]{1,2}年([0-9]{1,2}月)?([0-9]{1,2}日)?"),
        "和暦形式（例: 令和7年）",
    ),
]

RANGE_RES: List[re.Pattern] = [
    re.compile(r"([0-9]{1,2}:[0-9]{2})([-−—–〜~～－])([0-9]{1,2}:[0-9]{2})"),
    re.compile(r"([0-9]+)([-−—–〜~～－])([0-9]+)"),
]
WAVE_DASH = "〜"
DASH_NAMES: Dict[str, str] = {
    "-": "ハイフンマイナス",
    "–": "エンダッシュ",
    "—": "エムダッシュ",
    "－": "全角ハイフン",
    "~": "半角チルダ",
    "～": "全角チルダ",
}
DEFAULT_DASH_NAME = "ダッシュ類"

ENGLISH_UNITS = frozenset([
    "KB", "MB", "GB", "TB", "PB", "kb", "mb", "gb", "tb", "pb", "kB",
    "KiB", "MiB", "GiB", "TiB",
    "Hz", "kHz", "MHz", "GHz", "THz",
    "bps", "Kbps", "Mbps", "Gbps", "fps",
    "kg", "g", "mg", "km", "m", "cm", "mm",
    "L", "mL", "ml", "s", "ms", "ns",
    "W", "kW", "MW", "V", "mV", "kV", "A", "mA", "dB", "K",
])
NUMBER_UNIT_RE = re.compile(r"([0-9]+\.?[0-9]*)([A-Za-z]+)")
UNIT_PREFIX_RE = re.compile(
    r"\b(Version|version|Ver|ver|v|V|Rev|rev|No|no|Vol|vol|Chapter|chapter|Ch|ch|"
    r"Section|section|Sec|sec|Page|page|P|p)([0-9]+\.?[0-9]*)",
    re.ASCII,
)

HALFWIDTH_KANA_RE = re.compile(r"[｡-ﾟ]+")
NAKAGURO_RUN_RE = re.compile(r"[・･]{2,}")

# ---------------------------------------------------------------------------
# 混在検出
# ---------------------------------------------------------------------------

QUOTATION_STYLES: List[Tuple[str, re.Pattern, str]] = [
    ("japanese", re.compile(r"[「」『』]"), "「」"),
    ("double", re.compile(r"[“”\"]"), '""'),
    ("single", re.compile(r"[‘’']"), "''"),
]

EMPHASIS_STYLES: List[Tuple[str, re.Pattern, str]] = [
    ("asterisk", re.compile(r"\*\*[^*]+\*\*"), "**"),
    ("underscore", re.compile(r"__[^_]+__"), "__"),
]

PUNCTUATION_STYLES: List[Tuple[str, re.Pattern]] = [
    ("japanese", re.compile(r"[、。]")),
    ("western", re.compile(r"[，．]")),
]

PRONOUN_RE = re.compile(r"(私|僕|自分|当方|俺)(?=[はがも])")

# (カテゴリ, 記号表記, カタカナ表記)
UNIT_CATEGORIES: List[Tuple[str, re.Pattern, re.Pattern]] = [
    (
        "distance",
        re.compile(r"[0-9]+\s*(km|m|cm|mm)(?![a-zA-Z])", re.IGNORECASE),
        re.compile(r"キロメートル|メートル|センチメートル|ミリメートル"),
    ),
    (
        "weight",
        re.compile(r"[0-9]+\s*(kg|g|mg)(?![a-zA-Z])", re.IGNORECASE),
        re.compile(r"キログラム|グラム|ミリグラム"),
    ),
    (
        "time",
        re.compile(r"[0-9]+\s*(h|min|sec|s)(?![a-zA-Z])"),
        re.compile(r"時間|分|秒"),
    ),
    (
        "speed",
        re.compile(r"[0-9]+\s*km/h"),
        re.compile(r"キロメートル毎時"),
    ),
]

ENGLISH_WORD_RE = re.compile(r"[a-zA-Z]{2,}")

# ---------------------------------------------------------------------------
# Markdown
# ---------------------------------------------------------------------------

HEADING_RE = re.compile(r"^(#{1,6})\s+")
FENCE_RE = re.compile(r"^(`{3,}|~{3,})(.*)$")
TABLE_SEPARATOR_RE = re.compile(r"^\|[\s\-:|]+\|?$")
LIST_AFTER_COLON_RES: List[re.Pattern] = [
    re.compile(r"^\s*\n\s*[-*]\s"),
    re.compile(r"^\s*\n\s*[0-9]+\.\s"),
]


__all__ = [name for name in dir() if name.isupper() and not name.startswith("_")]
