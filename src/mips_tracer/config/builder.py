from typing import List, Tuple
from mips_tracer.transport.memory import DataMemory
from mips_tracer.arch.mips.cpu import MipsCpu
from mips_tracer.arch.mips.instruction import Instruction
from mips_tracer.loader.assembler import LogSink
from mips_tracer.loader.loader import AssemblyLoader
from .models import SystemConfig, SUPPORTED_ARCHITECTURES

# @intent:responsibility システム構成（Config）に基づいて、データメモリとCPUを生成・接続し、プログラムをロードします。
class SystemBuilder:
    def __init__(self, log: LogSink = print):
        self._log = log

    def build_system(self, config: SystemConfig) -> Tuple[MipsCpu, DataMemory]:
        if config.architecture not in SUPPORTED_ARCHITECTURES:
            raise ValueError(f"Unsupported architecture: {config.architecture}")

        memory = DataMemory(config.memory_words)
        cpu = MipsCpu(memory)

        if config.program:
            self.load_program(cpu, config.program)

        return cpu, memory

    # @intent:responsibility Configで指定されたプログラムをCPUにロードします。
    def load_program(self, cpu: MipsCpu, path: str) -> List[Instruction]:
        loader = AssemblyLoader(log=self._log)
        return loader.load_assembly(path, cpu)
