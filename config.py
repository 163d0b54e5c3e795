"""
Global Configuration for the Morse codec.
Centralizing the symbol table and token constants to ensure consistency
across encoding, decoding and the command-line tool.
"""

# Token Parameters
DOT = '.'               # 短点 (dit)
DASH = '-'              # 長点 (dah)
GROUP_SEPARATOR = ' '   # 文字グループ間の区切り
UNKNOWN_CHAR = ' '      # 復号できないグループの出力

# Symbol Tree Parameters
SENTINEL = '<'          # 「文字なし」を表すノード値。ルートと未使用ノードに入る
SPACE_PLACEHOLDER = '_' # スペースはツリー上の '_' (..--.-) に割り当てる
TREE_DEPTH = 6          # 最長の符号長 (6 トークン)
TREE_SIZE = 2 ** (TREE_DEPTH + 1) - 1  # 完全二分木のノード数 (127)

# Flattened complete binary tree, one row per depth.
# Node i has its dot child at 2*i+1 and its dash child at 2*i+2.
DECODE_MAP = (
    "<"
    "ET"
    "IANM"
    "SURWDKGO"
    "HVFÜL<PJBXCYZQÖ<"
    "54Ŝ3É<<2&È+<<<<16=/<<<(<7<<<8<90"
    "<<<<<<<<<<<<?_<<<<\"<<.<<<<@<<<'<<-<<<<<<<<;!<)<<<<<,<<<<:<<<<<<<"
)

# Self-check Parameters
SELF_CHECK_TEXT = "ABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890 ?"
