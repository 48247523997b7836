# mips_tracer/loader/assembler.py
"""
アーキテクチャごとのアセンブラ実装。
AssemblyLoaderから利用されます。
"""
import re
from abc import ABC, abstractmethod
from typing import Callable, Iterable, List, Tuple

from mips_tracer.arch.mips.instruction import Instruction, InstructionCategory
from mips_tracer.arch.mips.instructions import lookup_mnemonic
from mips_tracer.arch.mips.registers import index_of

# @intent:data_structure 診断メッセージの出力先。既定はprint。
LogSink = Callable[[str], None]

_DECIMAL = re.compile(r"^[+-]?[0-9]+$")
_HEX_DIGITS = re.compile(r"^[+-]?[0-9a-fA-F]+$")
_MEMORY_OPERAND = re.compile(r"^(.*)\((.*)\)$")

IMM_MIN = -0x8000
IMM_MAX = 0x7FFF

# @intent:responsibility アセンブラの共通インターフェースと、行単位の診断付き変換ループを定義します。
class BaseAssembler(ABC):
    @abstractmethod
    def assemble_line(self, line: str) -> Instruction:
        """
        1行を1命令に変換します。解析できない場合はValueErrorを送出します。
        """
        pass

    # @intent:responsibility ソース全体を変換します。不正な行は診断を出して読み飛ばします。
    # @intent:post-condition 読み飛ばした行の分だけ、後続命令のインデックスは詰められます。
    def assemble(self, lines: Iterable[str], log: LogSink = print) -> List[Instruction]:
        program: List[Instruction] = []
        for line_num, raw_line in enumerate(lines, 1):
            line = raw_line.rstrip("\r\n")
            if not line.strip():
                continue
            try:
                program.append(self.assemble_line(line))
            except ValueError:
                log(f"Invalid instruction '{line}' on line {line_num}")
        return program

    def _parse_line(self, line: str) -> Tuple[str, List[str]]:
        # カンマは区切りではなく単に除去される（"add $r2,$r0" は1トークンになる）
        tokens = line.replace(",", "").split()
        if not tokens:
            raise ValueError("Empty instruction")
        return tokens[0].lower(), tokens[1:4]

    # @intent:utility_function 10進数、または'x'を含む16進数表記を符号付き16ビット値に変換します。
    # @intent:rationale 'x'の位置で判定するため、"0xF" だけでなく "x1F" や "0x-5" も受理されます。
    def _parse_val(self, val_str: str) -> int:
        val_str = val_str.strip()
        if "x" in val_str:
            digits = val_str[val_str.index("x") + 1:]
            if not _HEX_DIGITS.match(digits):
                raise ValueError(f"Invalid hex value: {val_str}")
            value = int(digits, 16)
        else:
            if not _DECIMAL.match(val_str):
                raise ValueError(f"Invalid value: {val_str}")
            value = int(val_str)
        if not IMM_MIN <= value <= IMM_MAX:
            raise ValueError(f"Value out of 16-bit range: {val_str}")
        return value

# @intent:responsibility MIPSサブセット用のアセンブラ実装。
class MipsAssembler(BaseAssembler):
    """
    `op t1 t2 t3` 形式の1行をInstructionに変換します。
    ラベル、ディレクティブ、コメントはサポートしません。
    """
    def assemble_line(self, line: str) -> Instruction:
        mnemonic, operands = self._parse_line(line)
        info = lookup_mnemonic(mnemonic)
        if info is None:
            raise ValueError(f"Unknown mnemonic: {mnemonic}")

        category = info.category
        fields = {}

        if category == InstructionCategory.R:
            rd, rs, rt = self._require(operands, 3)
            fields = dict(rd=self._parse_reg(rd), rs=self._parse_reg(rs), rt=self._parse_reg(rt))
        elif category == InstructionCategory.I:
            # ソース順のまま: t1 -> rs, t2 -> rt (正規のMIPS順序には入れ替えない)
            rs, rt, imm = self._require(operands, 3)
            fields = dict(rs=self._parse_reg(rs), rt=self._parse_reg(rt), imm=self._parse_val(imm))
        elif category == InstructionCategory.LOAD_STORE:
            rt, address = self._require(operands, 2)
            base, offset = self._parse_memory_operand(address)
            fields = dict(rt=self._parse_reg(rt), rs=base, imm=offset)
        elif category == InstructionCategory.JUMP:
            (target,) = self._require(operands, 1)
            fields = dict(imm=self._parse_val(target))
        elif category == InstructionCategory.BRANCH:
            rs, rt, target = self._require(operands, 3)
            fields = dict(rs=self._parse_reg(rs), rt=self._parse_reg(rt), imm=self._parse_val(target))

        return Instruction(
            source=line.strip(),
            category=category,
            mnemonic=mnemonic,
            code=info.code,
            **fields
        )

    def _require(self, operands: List[str], count: int) -> List[str]:
        if len(operands) < count:
            raise ValueError(f"Expected {count} operands, got {len(operands)}")
        return operands[:count]

    # @intent:utility_function レジスタオペランドを解析します。'$'表記のほか、0〜31の数値も受理します。
    def _parse_reg(self, token: str) -> int:
        if token.startswith("$"):
            return index_of(token)
        if not _DECIMAL.match(token):
            raise ValueError(f"Invalid register {token}")
        number = int(token)
        if not 0 <= number < 32:
            raise ValueError(f"Invalid register {token}: out of range")
        return number

    # @intent:utility_function `offset(reg)` または裸のレジスタを (ベースレジスタ, オフセット) に変換します。
    def _parse_memory_operand(self, token: str) -> Tuple[int, int]:
        match = _MEMORY_OPERAND.match(token)
        if not match:
            return self._parse_reg(token), 0
        offset_str, register = match.group(1), match.group(2)
        offset = self._parse_val(offset_str) if offset_str else 0
        return self._parse_reg(register), offset
