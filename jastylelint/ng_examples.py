"""評価用のNG例コーパス。

カテゴリごとに「検出されるべきルールコード」とNG例文を持つ。
NOT_IMPL のカテゴリは本パッケージの検査対象外（助詞の重複など基本文法チェック）で、
評価では実行せず集計だけ行う。
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

IMPLEMENTED = "IMPLEMENTED"
NOT_IMPL = "NOT_IMPL"


@dataclass(frozen=True)
class NGExample:
    text: str
    correct_text: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class NGExampleCategory:
    id: str
    name: str
    description: str
    expected_rule: str
    status: str
    examples: Tuple[NGExample, ...] = field(default_factory=tuple)


def _category(id, name, description, expected_rule, status, *examples) -> NGExampleCategory:
    return NGExampleCategory(
        id=id,
        name=name,
        description=description,
        expected_rule=expected_rule,
        status=status,
        examples=tuple(NGExample(*e) for e in examples),
    )


NG_EXAMPLE_CATEGORIES: List[NGExampleCategory] = [
    _category(
        "double-particle", "二重助詞", "同じ助詞が連続して出現する誤り", "double-particle", NOT_IMPL,
        ("私がが行く", "私が行く", "「が」の重複"),
        ("本をを読む", "本を読む", "「を」の重複"),
        ("学校にに行く", "学校に行く", "「に」の重複"),
        ("彼とと話す", "彼と話す", "「と」の重複"),
    ),
    _category(
        "particle-sequence", "助詞連続", "不適切な助詞の連続使用", "particle-sequence", NOT_IMPL,
        ("彼がを見た", None, "「がを」の不適切な連続"),
        ("私をが呼んだ", None, "「をが」の不適切な連続"),
        ("本にを置く", None, "「にを」の不適切な連続"),
    ),
    _category(
        "verb-particle-mismatch", "動詞-助詞不整合", "自動詞と「を」の不自然な組み合わせ", "verb-particle-mismatch", NOT_IMPL,
        ("公園を行く", "公園に行く", "「行く」は自動詞"),
        ("家を帰る", "家に帰る", "「帰る」は自動詞"),
        ("プールを泳ぐ", "プールで泳ぐ", "「泳ぐ」は自動詞"),
    ),
    _category(
        "redundant-copula", "冗長な助動詞", "助詞と助動詞の不自然な組み合わせ", "particle-sequence", NOT_IMPL,
        ("問題でです", "問題です", "「でです」は冗長"),
        ("原因でます", "原因です", "「でます」は不自然"),
        ("そこにです", "そこです", "「にです」は不自然"),
    ),
    _category(
        "style-inconsistency", "文体混在", "敬体（です・ます調）と常体（である調）の混在", "style-inconsistency", IMPLEMENTED,
        ("これは素敵です。あれは平凡である。", None, "「です」と「である」の混在"),
        ("システムは正常に動作します。しかし、問題が残っている。", None, "「ます」と常体の混在"),
    ),
    _category(
        "ra-nuki", "ら抜き言葉", "可能の助動詞「られる」から「ら」を省略した表現", "ra-nuki", IMPLEMENTED,
        ("食べれる", "食べられる", "一段活用動詞のら抜き"),
        ("見れる", "見られる", "一段活用動詞のら抜き"),
        ("起きれる", "起きられる", "一段活用動詞のら抜き"),
        ("考えれる", "考えられる", "一段活用動詞のら抜き"),
    ),
    _category(
        "double-negation", "二重否定", "否定表現が二重に使用される表現", "double-negation", IMPLEMENTED,
        ("できないわけではない", "できる", "典型的な二重否定"),
        ("知らないことはない", "知っている", "「ないことはない」パターン"),
        ("行かないとは言えない", None, "「ないとは言えない」パターン"),
        ("嫌いではなくはない", None, "「ではなくはない」パターン"),
    ),
    _category(
        "particle-repetition", "同じ助詞の連続使用", "同一文内で同じ助詞が繰り返し使用される", "particle-repetition", IMPLEMENTED,
        ("私は本を彼は読む", None, "「は」が2回出現"),
        ("東京の会社の社長の息子", None, "「の」が3回連続"),
        ("私が彼が正しいと思う", None, "「が」が2回出現"),
    ),
    _category(
        "conjunction-repetition", "接続詞連続使用", "同じ接続詞が連続する文で使用される", "conjunction-repetition", IMPLEMENTED,
        ("しかし、Aです。しかし、Bです。", None, "「しかし」の連続"),
        ("また、これは正しい。また、あれも正しい。", None, "「また」の連続"),
        ("そして、出発した。そして、到着した。", None, "「そして」の連続"),
    ),
    _category(
        "adversative-ga", "逆接「が」連続使用", "逆接の「が」が連続する文で使用される", "adversative-ga", IMPLEMENTED,
        ("行きますが、Aです。行きますが、Bです。", None, "逆接「が」の連続"),
        ("分かりますが、難しいです。分かりますが、時間がかかります。", None, "逆接「が」の連続"),
    ),
    _category(
        "alphabet-width", "全角半角アルファベット混在", "全角と半角のアルファベットが混在している", "alphabet-width", IMPLEMENTED,
        ("これはＡＢＣとabcの混在です", "これはABCとabcです（どちらかに統一）", "全角と半角の混在"),
        ("ＴＥＳＴとtest", None, "全角TESTと半角testの混在"),
    ),
    _category(
        "weak-expression", "弱い表現", "曖昧で弱い表現", "weak-expression", IMPLEMENTED,
        ("これは正しいかもしれない", "これは正しい可能性がある", "「かもしれない」は弱い"),
        ("そうだと思われる", "そうだと考えられる", "「と思われる」は弱い"),
        ("ような気がする", "と推測される", "「気がする」は弱い"),
    ),
    _category(
        "comma-count", "読点過多", "1文中の読点が多すぎる", "comma-count", IMPLEMENTED,
        ("私は、今日、朝、昼、夜、と、食事をしました。", None, "読点が6個（閾値超過）"),
        ("彼は、急いで、駅に、向かい、電車に、乗り、会社に、着いた。", None, "読点が7個（閾値超過）"),
    ),
    _category(
        "term-notation", "技術用語表記", "技術用語の誤った表記", "term-notation", IMPLEMENTED,
        ("Javascriptを使用します", "JavaScriptを使用します"),
        ("Githubで公開します", "GitHubで公開します"),
        ("chatgptで生成する", "ChatGPTで生成する"),
        ("awsのサービス", "AWSのサービス"),
        ("azureを使う", "Azureを使う"),
        ("typescriptで開発", "TypeScriptで開発"),
    ),
    _category(
        "kanji-opening", "漢字開き", "ひらがなで書くべき漢字", "kanji-opening", IMPLEMENTED,
        ("確認して下さい", "確認してください"),
        ("それは出来る", "それはできる"),
        ("有難うございます", "ありがとうございます"),
        ("宜しくお願いします", "よろしくお願いします"),
        ("頂きます", "いただきます"),
    ),
    _category(
        "redundant-expression", "冗長表現", "重複した意味を持つ表現", "redundant-expression", IMPLEMENTED,
        ("馬から落馬する", "落馬する", "「馬から」と「落馬」が重複"),
        ("後で後悔する", "後悔する", "「後で」と「後悔」が重複"),
        ("一番最初", "最初", "「一番」と「最初」が重複"),
        ("各々それぞれ", "それぞれ", "「各々」と「それぞれ」が重複"),
    ),
    _category(
        "tautology", "重複表現（同語反復）", "同じ意味の言葉を重ねた表現", "tautology", IMPLEMENTED,
        ("頭痛が痛い", "頭が痛い / 頭痛がする", "「頭」と「痛い」が重複"),
        ("違和感を感じる", "違和感がある", "「感」が重複"),
        ("被害を被る", "被害を受ける", "「被」が重複"),
        ("犯罪を犯す", "罪を犯す", "「犯」が重複"),
    ),
    _category(
        "sahen-verb", "サ変動詞", "サ変動詞の使い方の問題", "sahen-verb", IMPLEMENTED,
        ("勉強をする", "勉強する", "「を」は不要（場合による）"),
        ("料理をする", "料理する", "「を」は不要（場合による）"),
    ),
    _category(
        "missing-subject", "主語の欠如", "文の主語が不明確", "missing-subject", IMPLEMENTED,
        ("昨日、買いました。", None, "何を買ったか不明"),
        ("とても嬉しかったです。", None, "何が嬉しかったか不明（文脈による）"),
    ),
    _category(
        "twisted-sentence", "ねじれ文", "主語と述語が対応していない文", "twisted-sentence", IMPLEMENTED,
        ("私の夢は医者になりたいです", "私の夢は医者になることです", "主語「夢は」と述語「なりたい」が不対応"),
        ("彼の特技は絵を上手です", "彼の特技は絵を描くことです", "主語と述語のねじれ"),
    ),
    _category(
        "long-sentence", "長すぎる文", "一文が長すぎて読みにくい", "long-sentence", IMPLEMENTED,
        (
            "私は昨日の朝早く起きて朝食を食べてから会社に向かい午前中は会議に出席して午後は資料を作成し"
            "夕方には上司に報告して帰宅したが、その日の仕事はとても忙しくて大変だったので、帰宅後はすぐに"
            "寝てしまい、翌朝目覚めたときには疲れが残っていたのでコーヒーを飲んだ。",
            None,
            "一文が長すぎる（分割が必要）",
        ),
    ),
    _category(
        "homophone", "同音異義語", "同じ読みで異なる意味の言葉の誤用", "homophone", IMPLEMENTED,
        ("意志が低い", "意識が低い / 志が低い", "「意志」と「意識」の混同"),
        ("移動の制約", "異動の制約", "会社の異動の場合"),
    ),
    _category(
        "honorific-error", "敬語の誤用", "敬語の使い方の誤り", "honorific-error", IMPLEMENTED,
        ("お客様がおっしゃられました", "お客様がおっしゃいました", "二重敬語"),
        ("ご覧になられる", "ご覧になる", "二重敬語"),
        ("部長がお見えになられる", "部長がお見えになる", "二重敬語"),
    ),
    _category(
        "adverb-agreement", "副詞の呼応", "副詞と述語の呼応の誤り", "adverb-agreement", IMPLEMENTED,
        ("決して行きます", "決して行きません", "「決して」は否定文と呼応"),
        ("たぶん行きません", "たぶん行くでしょう", "「たぶん」は肯定推量と呼応"),
        ("もし晴れたら行かない", "もし晴れたら行く", "「もし」は仮定の帰結と呼応"),
    ),
    _category(
        "no-particle-chain", "助詞「の」の連続", "「の」が連続して使用される", "no-particle-chain", IMPLEMENTED,
        ("東京の会社の部長の息子の友達", None, "「の」が4回連続"),
        ("彼の家の庭の花", None, "「の」が3回連続"),
    ),
    _category(
        "modifier-position", "修飾語の位置", "修飾語の配置が不適切", "modifier-position", IMPLEMENTED,
        ("赤い大きな花", "大きな赤い花", "大きさの修飾語は色より前"),
        ("古い素敵な本", "素敵な古い本", "主観的修飾語は前"),
    ),
    _category(
        "ambiguous-demonstrative", "曖昧な指示語", "指示語の参照先が不明確", "ambiguous-demonstrative", IMPLEMENTED,
        ("それは問題だ。しかし、それも重要だ。", None, "「それ」が何を指すか不明"),
        ("これについては、あれを参照してください。", None, "「これ」「あれ」が不明確"),
    ),
    _category(
        "passive-overuse", "受身の多用", "受身表現の使いすぎ", "passive-overuse", IMPLEMENTED,
        ("報告書が作成された。結果が分析された。結論が導かれた。", "報告書を作成した。結果を分析した。結論を導いた。", "受身が連続"),
    ),
    _category(
        "noun-chain", "名詞の連続", "名詞が連続して読みにくい", "noun-chain", IMPLEMENTED,
        ("東京都渋谷区松濤一丁目住所", None, "名詞が連続"),
        ("品質管理体制強化計画書", None, "名詞が連続で読みにくい"),
    ),
    _category(
        "conjunction-misuse", "接続詞の誤用", "接続詞の使い方が文脈に合わない", "conjunction-misuse", IMPLEMENTED,
        ("晴れた。しかし、外出した。", "晴れた。そこで、外出した。", "逆接の接続詞が不適切"),
        ("忙しい。だから、暇だ。", None, "順接の接続詞が不適切"),
    ),
    _category(
        "monotonous-ending", "文末表現の単調さ", "同じ文末表現が繰り返される", "monotonous-ending", IMPLEMENTED,
        ("Aです。Bです。Cです。Dです。", None, "「です」が連続して単調"),
        ("行きました。食べました。見ました。帰りました。", None, "「ました」が連続して単調"),
    ),
]


def implemented_categories() -> List[NGExampleCategory]:
    return [c for c in NG_EXAMPLE_CATEGORIES if c.status == IMPLEMENTED]


def total_example_count() -> int:
    return sum(len(c.examples) for c in NG_EXAMPLE_CATEGORIES)


__all__ = [
    "IMPLEMENTED",
    "NOT_IMPL",
    "NGExample",
    "NGExampleCategory",
    "NG_EXAMPLE_CATEGORIES",
    "implemented_categories",
    "total_example_count",
]
