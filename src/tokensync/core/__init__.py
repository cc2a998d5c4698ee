"""
tokensync core engine.

- keys: key normalisation
- tree: raw token tree accessors
- resolver: alias path search and reference resolution
- extractors: colour, dimension and typography extraction
- merge: deep merge of extracted maps
- assembler: builds the UnifiedTokenModel from a raw export
- manifest / loader / sync: configuration, input and persistence
"""
