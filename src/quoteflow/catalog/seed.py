"""Default product catalog."""

from __future__ import annotations

from quoteflow.model import CorporateProduct, IndustrialProduct, Product, ResidentialProduct


def default_products() -> list[Product]:
    """Return the default catalog: four products of each type."""
    return [
        IndustrialProduct(
            id="ind_001",
            name="Motor Trifásico 5CV",
            description="Motor elétrico trifásico para uso industrial",
            base_price=2500.00,
        ),
        IndustrialProduct(
            id="ind_002",
            name="Compressor Industrial 50HP",
            description="Compressor de ar para aplicações industriais",
            base_price=15000.00,
        ),
        IndustrialProduct(
            id="ind_003",
            name="Sistema de Automação PLC",
            description="Controlador lógico programável industrial",
            base_price=8000.00,
        ),
        IndustrialProduct(
            id="ind_004",
            name="Painel Elétrico 400A",
            description="Painel de distribuição elétrica industrial",
            base_price=12000.00,
        ),
        ResidentialProduct(
            id="res_001",
            name="Ventilador de Teto",
            description="Ventilador de teto com controle remoto",
            base_price=350.00,
        ),
        ResidentialProduct(
            id="res_002",
            name="Ar Condicionado Split 12000 BTUs",
            description="Ar condicionado split para ambientes residenciais",
            base_price=1200.00,
        ),
        ResidentialProduct(
            id="res_003",
            name="Sistema de Iluminação LED",
            description="Kit completo de iluminação LED residencial",
            base_price=800.00,
        ),
        ResidentialProduct(
            id="res_004",
            name="Interfone Digital",
            description="Sistema de interfone com vídeo e áudio",
            base_price=450.00,
        ),
        CorporateProduct(
            id="corp_001",
            name="Sistema ERP Corporativo",
            description="Sistema integrado de gestão empresarial",
            base_price=50000.00,
        ),
        CorporateProduct(
            id="corp_002",
            name="Plataforma de BI Analytics",
            description="Solução de Business Intelligence e Analytics",
            base_price=25000.00,
        ),
        CorporateProduct(
            id="corp_003",
            name="Sistema de CRM Avançado",
            description="Gestão de relacionamento com clientes",
            base_price=18000.00,
        ),
        CorporateProduct(
            id="corp_004",
            name="Plataforma de E-commerce",
            description="Solução completa para vendas online",
            base_price=35000.00,
        ),
    ]
