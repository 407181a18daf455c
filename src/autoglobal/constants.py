# Shared defaults: file patterns, excluded names, reserved globals
import re

DEFAULT_SRC = "src"
DEFAULT_OUT_NAME = "global.js"
DEFAULT_DEBOUNCE_MS = 150

SCRIPT_EXT_RE = re.compile(r"\.[jt]sx?$")
DEPENDENCY_DIR = "node_modules"
HIDDEN_PREFIX = "."
TMP_SUFFIX = ".tmp"

IDENT = r"[A-Za-z_$][A-Za-z0-9_$]*"

# Words that match IDENT but can never be a binding name
JS_KEYWORDS = frozenset({
  "await","break","case","catch","class","const","continue","debugger","default","delete","do",
  "else","enum","export","extends","false","finally","for","function","if","implements","import",
  "in","instanceof","interface","let","new","null","package","private","protected","public",
  "return","static","super","switch","this","throw","true","try","typeof","var","void","while",
  "with","yield",
})

# Everything `name in globalThis` answers true for in a Node.js process
RESERVED_GLOBALS = frozenset({
  # ECMAScript value properties & functions
  "globalThis","Infinity","NaN","undefined","eval","isFinite","isNaN","parseFloat","parseInt",
  "decodeURI","decodeURIComponent","encodeURI","encodeURIComponent","escape","unescape",
  # ECMAScript constructors & namespaces
  "AggregateError","Array","ArrayBuffer","Atomics","BigInt","BigInt64Array","BigUint64Array",
  "Boolean","DataView","Date","Error","EvalError","FinalizationRegistry","Float32Array",
  "Float64Array","Function","Int8Array","Int16Array","Int32Array","Intl","Iterator","JSON","Map",
  "Math","Number","Object","Promise","Proxy","RangeError","ReferenceError","Reflect","RegExp",
  "Set","SharedArrayBuffer","String","Symbol","SyntaxError","TypeError","Uint8Array",
  "Uint8ClampedArray","Uint16Array","Uint32Array","URIError","WeakMap","WeakRef","WeakSet",
  "WebAssembly",
  # Node.js globals
  "global","process","Buffer","console","queueMicrotask","setTimeout","clearTimeout",
  "setInterval","clearInterval","setImmediate","clearImmediate","structuredClone","atob","btoa",
  "URL","URLSearchParams","TextEncoder","TextDecoder","AbortController","AbortSignal","Event",
  "EventTarget","MessageChannel","MessagePort","MessageEvent","BroadcastChannel","Blob","File",
  "FormData","Headers","Request","Response","fetch","performance","crypto","Crypto","CryptoKey",
  "SubtleCrypto","DOMException","ReadableStream","WritableStream","TransformStream",
  "ReadableStreamDefaultReader","WritableStreamDefaultWriter","ByteLengthQueuingStrategy",
  "CountQueuingStrategy","TextEncoderStream","TextDecoderStream","CompressionStream",
  "DecompressionStream","WebSocket","CustomEvent","navigator","Navigator","Performance",
  "PerformanceEntry","PerformanceMark","PerformanceMeasure","PerformanceObserver",
  "PerformanceObserverEntryList","PerformanceResourceTiming",
  # inherited from Object.prototype
  "constructor","hasOwnProperty","isPrototypeOf","propertyIsEnumerable","toLocaleString",
  "toString","valueOf","__proto__","__defineGetter__","__defineSetter__","__lookupGetter__",
  "__lookupSetter__",
})
