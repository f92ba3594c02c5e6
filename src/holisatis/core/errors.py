# src/holisatis/core/errors.py
"""
Exceções canônicas do holisatis.

Este módulo define a hierarquia oficial de exceções utilizadas durante a
normalização de repositórios, o merge de opções e o carregamento de
documentos de configuração do Satis.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros de programação (variante de repositório desconhecida) falham cedo
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções do pacote herdam de `SatisConfigError`
    - Nenhuma exceção é levantada por consultas (lookups são totais)

Limites explícitos:
    - Texto de documento malformado passado ao construtor do modelo
      não gera exceção (fallback para defaults)
    - Não realiza recovery: quem captura decide
"""


class SatisConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do Satis.

    Permite captura genérica de qualquer falha do pacote sem mascarar
    exceções de outras origens.
    """


class UnsupportedRepositoryTypeError(SatisConfigError):
    """
    Exceção levantada quando um objeto fora da união
    {composer, vcs, artifact} chega à normalização de repositórios.

    Invariantes:
        - O modelo de configuração permanece inalterado
        - Nenhum descritor parcial é produzido
    """


class InvalidRepositoryError(SatisConfigError):
    """
    Exceção levantada quando uma variante de repositório é construída
    com dados inválidos (url vazia, tipo vcs desconhecido).
    """


class ConfigTypeConflictError(SatisConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"archive": {"directory": "dist"}}
        - override: {"archive": "dist"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class DocumentNotFoundError(SatisConfigError):
    """Arquivo de documento inexistente no caminho informado."""


class UnsupportedDocumentFormatError(SatisConfigError):
    """
    Formato de documento não suportado pelo store.

    Formatos suportados:
        - JSON (.json)
        - YAML (.yaml, .yml)
    """


class InvalidDocumentRootTypeError(SatisConfigError):
    """O conteúdo raiz do documento não é um objeto (`dict`)."""
