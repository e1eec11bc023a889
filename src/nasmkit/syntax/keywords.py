"""
NASM Keyword Tables
===================

Static keyword data for the NASM dialect of x86 assembly. Each category is
held in an immutable KeywordSet; the six sets are bundled in a
KeywordTables instance that the pattern compiler turns into matchers.

Categories
----------
| Table        | Examples                          |
|--------------|-----------------------------------|
| registers    | eax, r8d, xmm0, cr3, k1           |
| prefixes     | lock, rep, times, o16             |
| types        | byte, dword, near, strict, wrt    |
| instructions | mov, add, vpaddd, db, resq, equ   |
| directives   | section, global, bits, org        |
| preprocessor | %define, %macro, %include         |

Matching is case-insensitive: the sets store lower-cased words and the
compiled patterns use re.IGNORECASE.

A word may legitimately belong to more than one category (``wait`` is a
prefix and an instruction). The classifier's precedence order decides
which category is reported.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from nasmkit.errors import KeywordTableError


# =============================================================================
# Keyword Set
# =============================================================================

@dataclass(frozen=True)
class KeywordSet:
    """
    An immutable, case-insensitive set of keywords for one category.

    Construction validates every entry: an empty string, a string with
    whitespace or a non-string raises KeywordTableError, because such an
    entry would compile into a pattern that matches the wrong text.

    Attributes:
        category: Table name used in error messages
        words: Lower-cased keywords
    """
    category: str
    words: frozenset = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        normalized = set()
        for word in self.words:
            if not isinstance(word, str):
                raise KeywordTableError(self.category, word, "is not a string")
            if not word:
                raise KeywordTableError(self.category, word, "must not be empty")
            if any(ch.isspace() for ch in word):
                raise KeywordTableError(self.category, word, "must not contain whitespace")
            normalized.add(word.lower())
        # Frozen dataclass: bypass __setattr__ to store the normalized set
        object.__setattr__(self, "words", frozenset(normalized))

    @classmethod
    def of(cls, category: str, words: Iterable[str]) -> "KeywordSet":
        """Build a KeywordSet from any iterable of words."""
        return cls(category, frozenset(words))

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self.words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.words))

    def __len__(self) -> int:
        return len(self.words)


@dataclass(frozen=True)
class KeywordTables:
    """The six keyword categories the pattern compiler consumes."""
    registers: KeywordSet
    prefixes: KeywordSet
    types: KeywordSet
    instructions: KeywordSet
    directives: KeywordSet
    preprocessor: KeywordSet


# =============================================================================
# Registers
# =============================================================================

_GPR_LEGACY = (
    "al", "ah", "ax", "eax", "rax",
    "bl", "bh", "bx", "ebx", "rbx",
    "cl", "ch", "cx", "ecx", "rcx",
    "dl", "dh", "dx", "edx", "rdx",
    "spl", "sp", "esp", "rsp",
    "bpl", "bp", "ebp", "rbp",
    "sil", "si", "esi", "rsi",
    "dil", "di", "edi", "rdi",
)

_GPR_EXTENDED = tuple(
    f"r{n}{suffix}" for n in range(8, 16) for suffix in ("", "b", "w", "d", "l")
)

_SPECIAL_REGISTERS = (
    "cs", "ds", "es", "fs", "gs", "ss",
    "ip", "eip", "rip",
    "segr6", "segr7",
)

REGISTERS = (
    _GPR_LEGACY
    + _GPR_EXTENDED
    + _SPECIAL_REGISTERS
    + tuple(f"cr{n}" for n in range(16))
    + tuple(f"dr{n}" for n in range(16))
    + tuple(f"tr{n}" for n in range(8))
    + tuple(f"st{n}" for n in range(8))
    + tuple(f"mm{n}" for n in range(8))
    + tuple(f"xmm{n}" for n in range(32))
    + tuple(f"ymm{n}" for n in range(32))
    + tuple(f"zmm{n}" for n in range(32))
    + tuple(f"k{n}" for n in range(8))
    + tuple(f"bnd{n}" for n in range(4))
)


# =============================================================================
# Prefixes and Types
# =============================================================================

PREFIXES = (
    "a16", "a32", "a64", "asp", "lock", "o16", "o32", "o64", "osp",
    "rep", "repe", "repne", "repnz", "repz", "times", "wait",
    "xacquire", "xrelease", "bnd",
)

TYPES = (
    "byte", "word", "dword", "qword", "tword", "oword", "yword", "zword",
    "far", "near", "short", "strict", "to", "nosplit", "rel", "abs",
    "seg", "wrt", "ptr",
    "__float8__", "__float16__", "__float32__", "__float64__",
    "__float80m__", "__float80e__", "__float128l__", "__float128h__",
    "__utf16__", "__utf32__",
)


# =============================================================================
# Instructions
# =============================================================================

_CONDITIONS = (
    "a", "ae", "b", "be", "c", "e", "g", "ge", "l", "le", "na", "nae",
    "nb", "nbe", "nc", "ne", "ng", "nge", "nl", "nle", "no", "np", "ns",
    "nz", "o", "p", "pe", "po", "s", "z",
)

_GENERAL_INSTRUCTIONS = (
    "aaa", "aad", "aam", "aas", "adc", "adcx", "add", "adox", "and", "andn",
    "arpl", "bextr", "blsi", "blsmsk", "blsr", "bound", "bsf", "bsr",
    "bswap", "bt", "btc", "btr", "bts", "bzhi", "call", "cbw", "cdq", "cdqe",
    "clac", "clc", "cld", "clflush", "clflushopt", "cli", "clts", "clwb",
    "cmc", "cmp", "cmpsb", "cmpsd", "cmpsq", "cmpsw", "cmpxchg",
    "cmpxchg8b", "cmpxchg16b", "cpuid", "cqo", "crc32", "cwd", "cwde",
    "daa", "das", "dec", "div", "enter", "hlt", "idiv", "imul", "in", "inc",
    "insb", "insd", "insw", "int", "int1", "int3", "into", "invd",
    "invlpg", "invpcid", "iret", "iretd", "iretq", "iretw", "jcxz",
    "jecxz", "jmp", "jrcxz", "lahf", "lar", "lds", "lea", "leave", "les",
    "lfence", "lfs", "lgdt", "lgs", "lidt", "lldt", "lmsw", "lodsb",
    "lodsd", "lodsq", "lodsw", "loop", "loope", "loopne", "loopnz",
    "loopz", "lsl", "lss", "ltr", "lzcnt", "mfence", "monitor", "mov",
    "movbe", "movsb", "movsd", "movsq", "movsw", "movsx", "movsxd",
    "movzx", "mul", "mulx", "mwait", "neg", "nop", "not", "or", "out",
    "outsb", "outsd", "outsw", "pause", "pdep", "pext", "pop", "popa",
    "popad", "popcnt", "popf", "popfd", "popfq", "prefetch",
    "prefetchnta", "prefetcht0", "prefetcht1", "prefetcht2", "prefetchw",
    "push", "pusha", "pushad", "pushf", "pushfd", "pushfq", "rcl", "rcr",
    "rdfsbase", "rdgsbase", "rdmsr", "rdpid", "rdpmc", "rdrand", "rdseed",
    "rdtsc", "rdtscp", "ret", "retf", "retn", "rol", "ror", "rorx", "rsm",
    "sahf", "sal", "sar", "sarx", "sbb", "scasb", "scasd", "scasq",
    "scasw", "sfence", "sgdt", "shl", "shld", "shlx", "shr", "shrd",
    "shrx", "sidt", "sldt", "smsw", "stac", "stc", "std", "sti", "stosb",
    "stosd", "stosq", "stosw", "str", "sub", "swapgs", "syscall",
    "sysenter", "sysexit", "sysret", "test", "tzcnt", "ud0", "ud1", "ud2",
    "verr", "verw", "wait", "wbinvd", "wrfsbase", "wrgsbase", "wrmsr",
    "xabort", "xadd", "xbegin", "xchg", "xend", "xgetbv", "xlat", "xlatb",
    "xor", "xrstor", "xrstors", "xsave", "xsavec", "xsaveopt", "xsaves",
    "xsetbv", "xtest",
)

_CONDITIONAL_INSTRUCTIONS = tuple(
    f"{stem}{cc}" for stem in ("j", "set", "cmov") for cc in _CONDITIONS
)

_X87_INSTRUCTIONS = (
    "f2xm1", "fabs", "fadd", "faddp", "fbld", "fbstp", "fchs", "fclex",
    "fcmovb", "fcmovbe", "fcmove", "fcmovnb", "fcmovnbe", "fcmovne",
    "fcmovnu", "fcmovu", "fcom", "fcomi", "fcomip", "fcomp", "fcompp",
    "fcos", "fdecstp", "fdiv", "fdivp", "fdivr", "fdivrp", "ffree",
    "fiadd", "ficom", "ficomp", "fidiv", "fidivr", "fild", "fimul",
    "fincstp", "finit", "fist", "fistp", "fisttp", "fisub", "fisubr",
    "fld", "fld1", "fldcw", "fldenv", "fldl2e", "fldl2t", "fldlg2",
    "fldln2", "fldpi", "fldz", "fmul", "fmulp", "fnclex", "fninit",
    "fnop", "fnsave", "fnstcw", "fnstenv", "fnstsw", "fpatan", "fprem",
    "fprem1", "fptan", "frndint", "frstor", "fsave", "fscale", "fsin",
    "fsincos", "fsqrt", "fst", "fstcw", "fstenv", "fstp", "fstsw", "fsub",
    "fsubp", "fsubr", "fsubrp", "ftst", "fucom", "fucomi", "fucomip",
    "fucomp", "fucompp", "fwait", "fxam", "fxch", "fxrstor", "fxsave",
    "fxtract", "fyl2x", "fyl2xp1",
)

_SIMD_INSTRUCTIONS = (
    "addpd", "addps", "addsd", "addss", "addsubpd", "addsubps", "aesdec",
    "aesdeclast", "aesenc", "aesenclast", "aesimc", "aeskeygenassist",
    "andnpd", "andnps", "andpd", "andps", "blendpd", "blendps", "blendvpd",
    "blendvps", "cmppd", "cmpps", "cmpss", "comisd", "comiss",
    "cvtdq2pd", "cvtdq2ps", "cvtpd2dq", "cvtpd2ps", "cvtps2dq", "cvtps2pd",
    "cvtsd2si", "cvtsd2ss", "cvtsi2sd", "cvtsi2ss", "cvtss2sd", "cvtss2si",
    "cvttpd2dq", "cvttps2dq", "cvttsd2si", "cvttss2si", "divpd", "divps",
    "divsd", "divss", "dppd", "dpps", "emms", "extractps", "haddpd",
    "haddps", "hsubpd", "hsubps", "insertps", "lddqu", "ldmxcsr",
    "maskmovdqu", "maskmovq", "maxpd", "maxps", "maxsd", "maxss", "minpd",
    "minps", "minsd", "minss", "movapd", "movaps", "movd", "movddup",
    "movdq2q", "movdqa", "movdqu", "movhlps", "movhpd", "movhps",
    "movlhps", "movlpd", "movlps", "movmskpd", "movmskps", "movntdq",
    "movntdqa", "movnti", "movntpd", "movntps", "movntq", "movq",
    "movq2dq", "movshdup", "movsldup", "movss", "movupd", "movups",
    "mpsadbw", "mulpd", "mulps", "mulsd", "mulss", "orpd", "orps",
    "pabsb", "pabsd", "pabsw", "packssdw", "packsswb", "packusdw",
    "packuswb", "paddb", "paddd", "paddq", "paddsb", "paddsw", "paddusb",
    "paddusw", "paddw", "palignr", "pand", "pandn", "pavgb", "pavgw",
    "pblendvb", "pblendw", "pclmulqdq", "pcmpeqb", "pcmpeqd", "pcmpeqq",
    "pcmpeqw", "pcmpestri", "pcmpestrm", "pcmpgtb", "pcmpgtd", "pcmpgtq",
    "pcmpgtw", "pcmpistri", "pcmpistrm", "pextrb", "pextrd", "pextrq",
    "pextrw", "phaddd", "phaddsw", "phaddw", "phminposuw", "phsubd",
    "phsubsw", "phsubw", "pinsrb", "pinsrd", "pinsrq", "pinsrw",
    "pmaddubsw", "pmaddwd", "pmaxsb", "pmaxsd", "pmaxsw", "pmaxub",
    "pmaxud", "pmaxuw", "pminsb", "pminsd", "pminsw", "pminub", "pminud",
    "pminuw", "pmovmskb", "pmovsxbd", "pmovsxbq", "pmovsxbw", "pmovsxdq",
    "pmovsxwd", "pmovsxwq", "pmovzxbd", "pmovzxbq", "pmovzxbw",
    "pmovzxdq", "pmovzxwd", "pmovzxwq", "pmuldq", "pmulhrsw", "pmulhuw",
    "pmulhw", "pmulld", "pmullw", "pmuludq", "por", "psadbw", "pshufb",
    "pshufd", "pshufhw", "pshuflw", "pshufw", "psignb", "psignd",
    "psignw", "pslld", "pslldq", "psllq", "psllw", "psrad", "psraw",
    "psrld", "psrldq", "psrlq", "psrlw", "psubb", "psubd", "psubq",
    "psubsb", "psubsw", "psubusb", "psubusw", "psubw", "ptest",
    "punpckhbw", "punpckhdq", "punpckhqdq", "punpckhwd", "punpcklbw",
    "punpckldq", "punpcklqdq", "punpcklwd", "pxor", "rcpps", "rcpss",
    "roundpd", "roundps", "roundsd", "roundss", "rsqrtps", "rsqrtss",
    "sha1msg1", "sha1msg2", "sha1nexte", "sha1rnds4", "sha256msg1",
    "sha256msg2", "sha256rnds2", "shufpd", "shufps", "sqrtpd", "sqrtps",
    "sqrtsd", "sqrtss", "stmxcsr", "subpd", "subps", "subsd", "subss",
    "ucomisd", "ucomiss", "unpckhpd", "unpckhps", "unpcklpd", "unpcklps",
    "xorpd", "xorps",
)

# VEX encoded forms of the SSE arithmetic and data movement instructions
_AVX_STEMS = (
    "addpd", "addps", "addsd", "addss", "andnpd", "andnps", "andpd",
    "andps", "blendpd", "blendps", "blendvpd", "blendvps", "cmppd",
    "cmpps", "cmpsd", "cmpss", "divpd", "divps", "divsd", "divss",
    "maxpd", "maxps", "maxsd", "maxss", "minpd", "minps", "minsd",
    "minss", "movapd", "movaps", "movd", "movdqa", "movdqu", "movq",
    "movsd", "movss", "movupd", "movups", "mulpd", "mulps", "mulsd",
    "mulss", "orpd", "orps", "paddb", "paddd", "paddq", "paddw", "pand",
    "pandn", "pcmpeqb", "pcmpeqd", "pcmpeqq", "pcmpeqw", "por", "pshufb",
    "pshufd", "psubb", "psubd", "psubq", "psubw", "pxor", "shufpd",
    "shufps", "sqrtpd", "sqrtps", "sqrtsd", "sqrtss", "subpd", "subps",
    "subsd", "subss", "unpckhpd", "unpckhps", "unpcklpd", "unpcklps",
    "xorpd", "xorps",
)

_AVX_INSTRUCTIONS = tuple(f"v{stem}" for stem in _AVX_STEMS) + (
    "vbroadcastf128", "vbroadcasti128", "vbroadcastsd", "vbroadcastss",
    "vextractf128", "vextracti128", "vfmadd132pd", "vfmadd132ps",
    "vfmadd213pd", "vfmadd213ps", "vfmadd231pd", "vfmadd231ps",
    "vgatherdpd", "vgatherdps", "vinsertf128", "vinserti128",
    "vmaskmovpd", "vmaskmovps", "vpbroadcastb", "vpbroadcastd",
    "vpbroadcastq", "vpbroadcastw", "vperm2f128", "vperm2i128", "vpermd",
    "vpermilpd", "vpermilps", "vpermpd", "vpermps", "vpermq",
    "vpmaskmovd", "vpmaskmovq", "vpsllvd", "vpsllvq", "vpsravd",
    "vpsrlvd", "vpsrlvq", "vptest", "vtestpd", "vtestps", "vzeroall",
    "vzeroupper", "kandw", "kmovb", "kmovd", "kmovq", "kmovw", "korw",
    "kxorw", "knotw", "vmovdqa32", "vmovdqa64", "vmovdqu8", "vmovdqu16",
    "vmovdqu32", "vmovdqu64", "vpternlogd", "vpternlogq",
)

_SYSTEM_INSTRUCTIONS = (
    "getsec", "invept", "invvpid", "vmcall", "vmclear", "vmfunc",
    "vmlaunch", "vmptrld", "vmptrst", "vmread", "vmresume", "vmwrite",
    "vmxoff", "vmxon", "encls", "enclu", "tpause", "umonitor", "umwait",
)

PSEUDO_INSTRUCTIONS = (
    "db", "dw", "dd", "dq", "dt", "do", "dy", "dz",
    "resb", "resw", "resd", "resq", "rest", "reso", "resy", "resz",
    "equ", "incbin",
)

INSTRUCTIONS = (
    _GENERAL_INSTRUCTIONS
    + _CONDITIONAL_INSTRUCTIONS
    + _X87_INSTRUCTIONS
    + _SIMD_INSTRUCTIONS
    + _AVX_INSTRUCTIONS
    + _SYSTEM_INSTRUCTIONS
    + PSEUDO_INSTRUCTIONS
)


# =============================================================================
# Directives
# =============================================================================

DIRECTIVES = (
    "absolute", "bits", "common", "cpu", "debug", "default", "extern",
    "float", "global", "static", "list", "section", "segment", "warning",
    "sectalign", "export", "group", "import", "library", "map", "module",
    "org", "osabi", "safeseh", "uppercase", "prefix", "suffix", "gprefix",
    "gsuffix", "lprefix", "lsuffix", "limit", "options",
    "subsections_via_symbols", "no_dead_strip", "maxdump", "nodepend",
    "noseclabels", "struc", "endstruc", "istruc", "at", "iend", "align",
    "alignb", "required",
)

PREPROCESSOR_DIRECTIVES = (
    "%define", "%xdefine", "%idefine", "%ixdefine", "%undef", "%defstr",
    "%idefstr", "%deftok", "%ideftok", "%assign", "%iassign", "%strcat",
    "%strlen", "%substr", "%macro", "%imacro", "%endmacro", "%unmacro",
    "%rotate", "%rep", "%endrep", "%exitrep", "%if", "%elif", "%else",
    "%endif", "%ifdef", "%ifndef", "%elifdef", "%elifndef", "%ifmacro",
    "%ifnmacro", "%ifctx", "%ifnctx", "%ifidn", "%ifnidn", "%ifidni",
    "%ifnidni", "%ifid", "%ifnid", "%ifnum", "%ifnnum", "%ifstr",
    "%ifnstr", "%iftoken", "%ifntoken", "%ifempty", "%ifnempty",
    "%ifenv", "%ifnenv", "%include", "%pathsearch", "%depend", "%use",
    "%push", "%pop", "%repl", "%arg", "%local", "%stacksize", "%line",
    "%error", "%warning", "%fatal", "%pragma", "%clear",
)


# =============================================================================
# Default Tables
# =============================================================================

DEFAULT_TABLES = KeywordTables(
    registers=KeywordSet.of("registers", REGISTERS),
    prefixes=KeywordSet.of("prefixes", PREFIXES),
    types=KeywordSet.of("types", TYPES),
    instructions=KeywordSet.of("instructions", INSTRUCTIONS),
    directives=KeywordSet.of("directives", DIRECTIVES),
    preprocessor=KeywordSet.of("preprocessor", PREPROCESSOR_DIRECTIVES),
)
