# tests/loader/test_assembler.py
"""
mips_tracer.loader.assemblerモジュールの単体テスト。
"""
import dataclasses
import unittest

from mips_tracer.arch.mips.instruction import Instruction, InstructionCategory
from mips_tracer.loader.assembler import MipsAssembler

# @intent:test_suite MIPSアセンブラの1行解析と、不正行の診断の検証。
class TestMipsAssembler(unittest.TestCase):
    def setUp(self):
        self.assembler = MipsAssembler()

    # @intent:test_case_commas カンマと16進数の即値を含むI形式の行を検証します。
    def test_i_type_with_commas_and_hex(self):
        inst = self.assembler.assemble_line("addi, $r0, $zero, 0xF")
        self.assertEqual(inst.category, InstructionCategory.I)
        self.assertEqual(inst.mnemonic, "addi")
        self.assertEqual(inst.code, 32)
        self.assertEqual((inst.rs, inst.rt, inst.imm), (8, 0, 15))

    def test_r_type(self):
        inst = self.assembler.assemble_line("add $r2 $r0 $r1")
        self.assertEqual(inst.category, InstructionCategory.R)
        self.assertEqual((inst.rd, inst.rs, inst.rt, inst.imm), (10, 8, 9, 0))
        self.assertEqual(inst.code, 32)

    def test_mnemonic_case_insensitive(self):
        inst = self.assembler.assemble_line("ADD $R2 $r0 $r1")
        self.assertEqual(inst.mnemonic, "add")
        self.assertEqual(inst.rd, 10)

    def test_numeric_registers(self):
        inst = self.assembler.assemble_line("add 10 8 9")
        self.assertEqual((inst.rd, inst.rs, inst.rt), (10, 8, 9))

    def test_load_with_offset(self):
        inst = self.assembler.assemble_line("lw $r1 -8($sp)")
        self.assertEqual(inst.category, InstructionCategory.LOAD_STORE)
        self.assertEqual((inst.rt, inst.rs, inst.imm), (9, 29, -8))

    def test_store_bare_register(self):
        inst = self.assembler.assemble_line("sw $r1 $a0")
        self.assertEqual((inst.rt, inst.rs, inst.imm), (9, 4, 0))

    def test_empty_offset(self):
        inst = self.assembler.assemble_line("lw $r1 ($r0)")
        self.assertEqual((inst.rs, inst.imm), (8, 0))

    def test_jump_and_branch(self):
        self.assertEqual(self.assembler.assemble_line("j 5").imm, 5)
        self.assertEqual(self.assembler.assemble_line("j x1F").imm, 31)
        inst = self.assembler.assemble_line("beq $r0 $zero 3")
        self.assertEqual(inst.category, InstructionCategory.BRANCH)
        self.assertEqual((inst.rs, inst.rt, inst.imm), (8, 0, 3))

    def test_hex_forms(self):
        self.assertEqual(self.assembler.assemble_line("addi $r0 $zero 0x7FFF").imm, 0x7FFF)
        self.assertEqual(self.assembler.assemble_line("addi $r0 $zero 0x-5").imm, -5)
        self.assertEqual(self.assembler.assemble_line("addi $r0 $zero -32768").imm, -32768)

    def test_operandless(self):
        for line in ("nop", "exit"):
            inst = self.assembler.assemble_line(line)
            self.assertEqual((inst.rd, inst.rs, inst.rt, inst.imm), (0, 0, 0, 0))
        self.assertEqual(self.assembler.assemble_line("exit").category, InstructionCategory.EXIT)

    def test_extra_tokens_are_ignored(self):
        inst = self.assembler.assemble_line("add $r2 $r0 $r1 $r3")
        self.assertEqual((inst.rd, inst.rs, inst.rt), (10, 8, 9))

    def test_source_is_kept(self):
        inst = self.assembler.assemble_line("  addi $r0 $zero 5  ")
        self.assertEqual(inst.source, "addi $r0 $zero 5")
        self.assertEqual(str(inst), "addi $r0 $zero 5")

    def test_invalid_lines(self):
        invalid = [
            "foo $r0",
            "add $r0 $r1",
            "add $r2,$r0,$r1",
            "addi $r0 $zero 40000",
            "addi $r0 $zero 0xFFFF",
            "addi $r0 $t0 1",
            "addi $r0 $zero abc",
            "addi $r0 $zero $r1",
            "lw $r0 4($bogus)",
            "lw $r0",
            "add 32 0 0",
            "j",
        ]
        for line in invalid:
            with self.subTest(line=line):
                with self.assertRaises(ValueError):
                    self.assembler.assemble_line(line)

    # @intent:test_case_diagnostics 不正な行は診断を出して読み飛ばし、空行は黙って無視することを検証します。
    def test_assemble_skips_invalid_lines(self):
        messages = []
        program = self.assembler.assemble(
            ["addi $r0 $zero 1\n", "\n", "   \n", "bogus\n", "exit\n"],
            log=messages.append,
        )
        self.assertEqual([inst.mnemonic for inst in program], ["addi", "exit"])
        self.assertEqual(messages, ["Invalid instruction 'bogus' on line 4"])

    def test_assemble_empty(self):
        messages = []
        self.assertEqual(self.assembler.assemble([], log=messages.append), [])
        self.assertEqual(messages, [])

class TestInstruction(unittest.TestCase):
    def test_representation(self):
        assembler = MipsAssembler()
        self.assertEqual(assembler.assemble_line("add $r2 $r0 $r1").representation(), "add $r2 $r0 $r1".ljust(25))
        self.assertEqual(
            assembler.assemble_line("addi $r0 $zero 0xF").representation(),
            "addi $r0 $zero 0xF".ljust(25) + " (imm: 15)",
        )

    def test_immutability(self):
        inst = Instruction(source="nop", category=InstructionCategory.NOP, mnemonic="nop")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            inst.imm = 1

if __name__ == '__main__':
    unittest.main()
