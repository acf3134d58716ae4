"""English -> Urdu word table used for the word-for-word summary translation.

Keys are lowercase single words. Values are stored exactly as they should
appear in the output (no re-casing). This is a demonstration table: there is
no grammar, no context and no reordering.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

# Ordered (english, urdu) pairs. When a key appears more than once the last
# pair wins, see build_translation_table().
URDU_WORD_PAIRS: Tuple[Tuple[str, str], ...] = (
    # API / web vocabulary
    ('an', 'ایک'),
    ('api', 'اے پی آئی'),
    ('apis', 'اے پی آئیز'),
    ('application', 'ایپلیکیشن'),
    ('interface', 'انٹرفیس'),
    ('allows', 'اجازت دیتا ہے'),
    ('for', 'کے لیے'),
    ('two', 'دو'),
    ('or', 'یا'),
    ('more', 'مزید'),
    ('to', 'کو'),
    ('communicate', 'بات چیت کرنا'),
    ('with', 'کے ساتھ'),
    ('one', 'ایک'),
    ('another', 'دوسرے'),
    ('and', 'اور'),
    ('send', 'بھیجنا'),
    ('data', 'ڈیٹا'),
    ('back', 'واپس'),
    ('the', 'دی'),
    ('server', 'سرور'),
    ('there', 'وہاں'),
    ('are', 'ہیں'),
    ('different', 'مختلف'),
    ('styles', 'انداز'),
    ('each', 'ہر ایک'),
    ('has', 'رکھتا ہے'),
    ('its', 'اس کے'),
    ('unique', 'منفرد'),
    ('architecture', 'فن تعمیر'),
    ('in', 'میں'),
    ('this', 'یہ'),
    ('article', 'مضمون'),
    ('you', 'آپ'),
    ('will', 'گے'),
    ('learn', 'سیکھیں'),
    ('basics', 'بنیادی باتیں'),
    ('rest', 'ریسٹ'),
    ('how', 'کیسے'),
    ('they', 'وہ'),
    ('work', 'کام کرتے ہیں'),
    ('integral', 'لازمی'),
    ('component', 'جز'),
    ('modern-day', 'جدید دور'),
    ('software', 'سافٹ ویئر'),
    ('development', 'ترقی'),
    ('operated', 'چلایا جاتا ہے'),
    ('based', 'بنیاد پر'),
    ('standardized', 'معیاری'),
    ('set', 'سیٹ'),
    ('most', 'سب سے زیادہ'),
    ('common', 'عام'),

    # Summary / demo vocabulary
    ('short', 'مختصر'),
    ('from', 'سے'),
    ('a', 'ایک'),
    ('blog', 'بلاگ'),
    ('summary', 'خلاصہ'),
    ('of', 'کا'),
    ('is', 'ہے'),
    ('example', 'مثال'),
    ('text', 'متن'),
    ('generated', 'تیار کیا گیا'),
    ('by', 'بذریعہ'),
    ('hugging', 'ہگنگ'),
    ('face', 'فیس'),
    ('model', 'ماڈل'),
    ('it', 'یہ'),
    ('very', 'بہت'),
    ('basic', 'بنیادی'),
    ('translation', 'ترجمہ'),
    ('quality', 'معیار'),
    ('be', 'ہو'),
    ('limited', 'محدود'),
    ('due', 'کی وجہ سے'),
    ('word', 'لفظ'),
    ('substitution', 'متبادل'),
    ('no', 'نہیں'),
    ('context', 'سیاق و سباق'),
    ('understanding', 'سمجھ'),
    ('grammar', 'قواعد'),
    ('rules', 'قواعد'),
    ('applied', 'لاگو کیا گیا'),
    ('here', 'یہاں'),
    ('please', 'براہ مہربانی'),
    ('note', 'نوٹ کریں'),
    ('demonstration', 'مظاہرے'),
    ('purposes', 'مقاصد'),
    ('only', 'صرف'),
)


def build_translation_table(pairs: Iterable[Tuple[str, str]]) -> Mapping[str, str]:
    """Build a read-only lookup table from (word, replacement) pairs.

    - Keys are lowercased and stripped
    - Duplicate keys resolve last-write-wins
    - Empty keys are ignored
    """
    table = {}
    for word, replacement in pairs:
        key = word.lower().strip()
        if not key:
            continue
        table[key] = replacement
    return MappingProxyType(table)


URDU_DICTIONARY = build_translation_table(URDU_WORD_PAIRS)

# Shown instead of a translation when no English summary was produced
URDU_FAILURE_NOTICE = 'اردو خلاصہ تیار کرنے میں ناکامی ہوئی (انگریزی خلاصہ دستیاب نہیں تھا)۔'
