# src/manifest_decoder/core/__init__.py
"""
Core do Manifest Decoder.

Componentes principais:
    - objects    → modelo de dados (tipados, genérico, listas, GVK)
    - registry   → mapeamento GVK → tipo concreto (estado read-mostly)
    - decoding   → resolver de arquivos, splitter, type resolver, patches,
                   handlers e orquestrador
    - config     → carregamento e merge de configuração, `DecoderSettings`
    - context    → contexto cancelável entregue aos handlers
    - client     → protocolo do Resource Client externo
    - exceptions → hierarquia canônica de erros

Limites explícitos:
    - Não serializa objetos de volta para bytes
    - Não valida schema
    - Não implementa o backend de Resource Client
"""
