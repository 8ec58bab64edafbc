"""Pure helpers with no I/O: URLs, callables, trees and object graphs."""
