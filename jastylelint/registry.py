"""ルールの登録表。ここに並んだ順にチェックが実行される。"""
from __future__ import annotations

from typing import List

from . import grammar_rules as g
from . import markdown_rules as md
from . import notation_rules as n
from . import rule_data as data
from .models import RuleCode
from .rules import (
    DictionaryRule,
    DominantFormRule,
    FunctionRule,
    GroupedMixRule,
    MixRule,
    PatternRule,
    Rule,
)


def _change(value: str) -> List[str]:
    return [f"「{value}」に変更する"]


def build_rules() -> List[Rule]:
    """登録済みルールの新しいインスタンス一覧を返す。"""
    return [
        FunctionRule("style-consistency", RuleCode.STYLE_INCONSISTENCY, "enable_style_consistency",
                     g.check_style_consistency, "文体の混在（敬体/常体）を検出します"),
        FunctionRule("ra-nuki-detection", RuleCode.RA_NUKI, "enable_ra_nuki_detection",
                     g.check_ra_nuki, "ら抜き言葉を検出します"),
        PatternRule(
            "double-negation", RuleCode.DOUBLE_NEGATION, "enable_double_negation",
            g.DOUBLE_NEGATION_RES,
            lambda k, v: f"二重否定「{k}」が検出されました。わかりにくい表現になる可能性があります。",
            lambda k, v: [v],
            "二重否定を検出します",
        ),
        FunctionRule("particle-repetition", RuleCode.PARTICLE_REPETITION, "enable_particle_repetition",
                     g.check_particle_repetition, "同じ助詞の連続使用を検出します"),
        FunctionRule("conjunction-repetition", RuleCode.CONJUNCTION_REPETITION, "enable_conjunction_repetition",
                     g.check_conjunction_repetition, "同じ接続詞の連続使用を検出します"),
        FunctionRule("adversative-ga", RuleCode.ADVERSATIVE_GA, "enable_adversative_ga",
                     g.check_adversative_ga, "逆接の「が」の連続使用を検出します"),
        DominantFormRule(
            "alphabet-width", RuleCode.ALPHABET_WIDTH, "enable_alphabet_width",
            n.collect_alphabet_widths, n.alphabet_width_message, n.alphabet_width_suggestions,
            tie_default=n.HALF, description="全角・半角アルファベットの混在を検出します",
        ),
        PatternRule(
            "weak-expression", RuleCode.WEAK_EXPRESSION, "enable_weak_expression",
            g.weak_expression_patterns,
            lambda k, v: f"弱い表現「{v[0]}」が使用されています。より断定的な表現を検討してください。",
            lambda k, v: _change(v[1]),
            "弱い日本語表現を検出します",
        ),
        FunctionRule("comma-count", RuleCode.COMMA_COUNT, "enable_comma_count",
                     g.check_comma_count, "1文中の読点の数をチェックします"),
        PatternRule(
            "term-notation", RuleCode.TERM_NOTATION, "enable_term_notation",
            n.term_patterns,
            lambda k, v: f"技術用語の表記「{v[0]}」は「{v[1]}」に統一してください。",
            lambda k, v: _change(v[1]),
            "技術用語の表記ゆれを検出します",
        ),
        DictionaryRule(
            "kanji-opening", RuleCode.KANJI_OPENING, "enable_kanji_opening",
            data.KANJI_OPENING,
            lambda k, v: f"漢字「{k}」はひらがな「{v}」で表記することが推奨されます。",
            lambda k, v: _change(v),
            "ひらがなで書くべき漢字を検出します",
        ),
        DictionaryRule(
            "redundant-expression", RuleCode.REDUNDANT_EXPRESSION, "enable_redundant_expression",
            data.REDUNDANT_EXPRESSIONS,
            lambda k, v: f"冗長表現「{k}」が検出されました。「{v}」に簡潔化できます。",
            lambda k, v: [v],
            "冗長な表現を検出します",
        ),
        DictionaryRule(
            "tautology", RuleCode.TAUTOLOGY, "enable_tautology",
            data.TAUTOLOGY_PATTERNS, g.tautology_message, lambda k, v: v[0],
            "重複表現（頭痛が痛い等）を検出します",
        ),
        FunctionRule("no-particle-chain", RuleCode.NO_PARTICLE_CHAIN, "enable_no_particle_chain",
                     g.check_no_particle_chain, "助詞「の」の連続使用を検出します"),
        FunctionRule("monotonous-ending", RuleCode.MONOTONOUS_ENDING, "enable_monotonous_ending",
                     g.check_monotonous_ending, "文末表現の単調さを検出します"),
        FunctionRule("long-sentence", RuleCode.LONG_SENTENCE, "enable_long_sentence",
                     g.check_long_sentence, "長すぎる文を検出します"),
        DictionaryRule(
            "sahen-verb", RuleCode.SAHEN_VERB, "enable_sahen_verb",
            data.SAHEN_VERB_PATTERNS, g.sahen_message, lambda k, v: [v],
            "サ変動詞の冗長な「を」を検出します",
        ),
        FunctionRule("missing-subject", RuleCode.MISSING_SUBJECT, "enable_missing_subject",
                     g.check_missing_subject, "主語が欠如している文を検出します"),
        FunctionRule("twisted-sentence", RuleCode.TWISTED_SENTENCE, "enable_twisted_sentence",
                     g.check_twisted_sentence, "ねじれ文（主語と述語の不対応）を検出します"),
        DictionaryRule(
            "homophone", RuleCode.HOMOPHONE, "enable_homophone",
            data.HOMOPHONE_PATTERNS, g.homophone_message, lambda k, v: v[0],
            "同音異義語の誤用を検出します",
        ),
        DictionaryRule(
            "honorific-error", RuleCode.HONORIFIC_ERROR, "enable_honorific_error",
            g.HONORIFIC_TABLE, g.honorific_message, lambda k, v: [v],
            "敬語の誤用（二重敬語など）を検出します",
        ),
        FunctionRule("adverb-agreement", RuleCode.ADVERB_AGREEMENT, "enable_adverb_agreement",
                     g.check_adverb_agreement, "副詞と述語の呼応の誤りを検出します"),
        DictionaryRule(
            "modifier-position", RuleCode.MODIFIER_POSITION, "enable_modifier_position",
            g.MODIFIER_TABLE, g.modifier_message, lambda k, v: [v[0]],
            "修飾語の位置による曖昧さを検出します",
        ),
        FunctionRule("ambiguous-demonstrative", RuleCode.AMBIGUOUS_DEMONSTRATIVE, "enable_ambiguous_demonstrative",
                     g.check_ambiguous_demonstrative, "曖昧な指示語の使用を検出します"),
        FunctionRule("passive-overuse", RuleCode.PASSIVE_OVERUSE, "enable_passive_overuse",
                     g.check_passive_overuse, "受身表現の多用を検出します"),
        FunctionRule("noun-chain", RuleCode.NOUN_CHAIN, "enable_noun_chain",
                     g.check_noun_chain, "名詞の連続による読みにくさを検出します"),
        DictionaryRule(
            "conjunction-misuse", RuleCode.CONJUNCTION_MISUSE, "enable_conjunction_misuse",
            data.CONJUNCTION_MISUSE_PATTERNS, g.conjunction_misuse_message, lambda k, v: [v[0]],
            "接続詞の誤用を検出します",
        ),
        # 表記
        DictionaryRule(
            "okurigana-variant", RuleCode.OKURIGANA_VARIANT, "enable_kanji_opening",
            data.OKURIGANA_VARIANTS,
            lambda k, v: f"送り仮名「{k}」は「{v}」が標準的な表記です。",
            lambda k, v: _change(v),
            "送り仮名の揺れを検出します",
        ),
        DictionaryRule(
            "orthography-variant", RuleCode.ORTHOGRAPHY_VARIANT, "enable_kanji_opening",
            data.ORTHOGRAPHY_VARIANTS,
            lambda k, v: f"表記「{k}」は「{v}」に統一することが推奨されます。",
            lambda k, v: _change(v),
            "表記ゆれを検出します",
        ),
        DictionaryRule(
            "katakana-chouon", RuleCode.KATAKANA_CHOUON, "enable_term_notation",
            n.KATAKANA_TABLE,
            lambda k, v: f"カタカナ表記「{k}」は「{v}」が標準的です。",
            lambda k, v: _change(v),
            "カタカナ語の長音符の揺れを検出します",
            skip=n.skip_existing_chouon,
        ),
        DominantFormRule(
            "number-width-mix", RuleCode.NUMBER_WIDTH_MIX, "enable_alphabet_width",
            n.collect_number_widths, n.number_width_message, n.number_width_suggestions,
            tie_default=n.HALF, description="全角・半角数字の混在を検出します",
        ),
        DominantFormRule(
            "symbol-width-mix", RuleCode.SYMBOL_WIDTH_MIX, "enable_alphabet_width",
            n.collect_symbol_widths, n.symbol_width_message, n.symbol_width_suggestions,
            tie_default=n.HALF, group=n.symbol_name, description="全角・半角記号の混在を検出します",
        ),
        DominantFormRule(
            "numeral-style-mix", RuleCode.NUMERAL_STYLE_MIX, "enable_alphabet_width",
            n.collect_numeral_styles, n.numeral_style_message, n.numeral_style_suggestions,
            tie_default=n.ARABIC, description="漢数字とアラビア数字の混在を検出します",
        ),
        DominantFormRule(
            "date-format-variant", RuleCode.DATE_FORMAT_VARIANT, "enable_alphabet_width",
            n.collect_dates, n.date_format_message, n.date_format_suggestions,
            description="日付形式の揺れを検出します",
        ),
        FunctionRule("halfwidth-kana", RuleCode.HALFWIDTH_KANA, "enable_alphabet_width",
                     n.check_halfwidth_kana, "半角カナを検出します"),
        FunctionRule("dash-tilde-normalization", RuleCode.DASH_TILDE_NORMALIZATION, "enable_alphabet_width",
                     n.check_dash_tilde, "範囲表現のダッシュ・チルダを検出します"),
        FunctionRule("space-around-unit", RuleCode.SPACE_AROUND_UNIT, "enable_alphabet_width",
                     n.check_space_around_unit, "数字と単位の間のスペース欠落を検出します"),
        FunctionRule("bracket-quote-mismatch", RuleCode.BRACKET_QUOTE_MISMATCH, "enable_comma_count",
                     g.check_brackets, "括弧・引用符の不一致を検出し、正しい対応を提案します"),
        FunctionRule("nakaguro-usage", RuleCode.NAKAGURO_USAGE, "enable_comma_count",
                     n.check_nakaguro, "中黒の連続使用を検出します"),
        # 混在
        MixRule(
            "bullet-style-mix", RuleCode.BULLET_STYLE_MIX, "enable_bullet_style_mix",
            n.collect_bullets, n.bullet_message, ["箇条書き記号を「・」「-」「*」のいずれかに統一してください"],
            "箇条書き記号の混在を検出します",
        ),
        MixRule(
            "quotation-style-mix", RuleCode.QUOTATION_STYLE_MIX, "enable_quotation_style_mix",
            n.collect_quotations, n.quotation_message, ["日本語の文章では「」の使用を推奨します"],
            "引用符のスタイルの混在を検出します",
        ),
        MixRule(
            "emphasis-style-mix", RuleCode.EMPHASIS_STYLE_MIX, "enable_emphasis_style_mix",
            n.collect_emphasis, n.emphasis_message, ["**（アスタリスク）に統一してください"],
            "強調記号のスタイルの混在を検出します",
        ),
        MixRule(
            "punctuation-style-mix", RuleCode.PUNCTUATION_STYLE_MIX, "enable_punctuation_style_mix",
            n.collect_punctuation, n.punctuation_message, ["日本語の文章では「、。」の使用を推奨します"],
            "句読点のスタイルの混在を検出します",
        ),
        MixRule(
            "pronoun-mix", RuleCode.PRONOUN_MIX, "enable_pronoun_mix",
            n.collect_pronouns, n.pronoun_message, ["人称代名詞をいずれかに統一してください"],
            "人称代名詞の混在を検出します",
        ),
        FunctionRule("unit-notation-mix", RuleCode.UNIT_NOTATION_MIX, "enable_unit_notation_mix",
                     n.check_unit_notation, "単位表記の混在を検出します"),
        GroupedMixRule(
            "english-case-mix", RuleCode.ENGLISH_CASE_MIX, "enable_english_case_mix",
            n.collect_english_case, n.english_case_message, n.english_case_suggestions,
            "英語表記の大文字小文字の混在を検出します",
        ),
        # Markdown
        FunctionRule("heading-level-skip", RuleCode.HEADING_LEVEL_SKIP, "enable_heading_level_skip",
                     md.check_heading_level_skip, "見出しレベルの飛びを検出します"),
        FunctionRule("table-column-mismatch", RuleCode.TABLE_COLUMN_MISMATCH, "enable_table_column_mismatch",
                     md.check_table_column_mismatch, "Markdownテーブルの列数不一致を検出します"),
        FunctionRule("code-block-language", RuleCode.CODE_BLOCK_LANGUAGE, "enable_code_block_language",
                     md.check_code_block_language, "コードブロックの言語指定欠落を検出します"),
        FunctionRule("sentence-ending-colon", RuleCode.SENTENCE_ENDING_COLON, "enable_sentence_ending_colon",
                     md.check_sentence_ending_colon, "文末のコロン（：）をチェックします"),
    ]


__all__ = ["build_rules"]
