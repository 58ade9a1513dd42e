# roi_calculator/db/models.py
# -----------------------------------------------------------------------------
# ORM models
# - FinancialDetails: the four financial inputs of a calculation
# - BusinessStrategy: funding option / business model labels (+ equipments)
# - Equipment / BusinessStrategyEquipment: equipment catalog and links
# - RoiResult: aggregate figures of one calculation (monthly series not stored)
# -----------------------------------------------------------------------------
from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from roi_calculator.db.session import Base


class FinancialDetails(Base):
    __tablename__ = "financial_details"

    id = Column(Integer, primary_key=True, index=True)
    initial_investment = Column(Integer, nullable=False)
    expected_monthly_revenue = Column(Integer, nullable=False)
    monthly_operating_cost = Column(Integer, nullable=False)
    timeframe = Column(Integer, nullable=False)  # months
    created_at = Column(DateTime, server_default=func.now())


class BusinessStrategy(Base):
    __tablename__ = "business_strategies"

    id = Column(Integer, primary_key=True, index=True)
    strategy_name = Column(String, nullable=False)
    funding_option = Column(String, nullable=True)
    business_model = Column(String, nullable=True, index=True)
    created_at = Column(DateTime, server_default=func.now())

    equipments = relationship(
        "BusinessStrategyEquipment", back_populates="business_strategy"
    )


class Equipment(Base):
    __tablename__ = "equipments"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    price = Column(Integer, default=0)
    description = Column(String, nullable=True)


class BusinessStrategyEquipment(Base):
    __tablename__ = "business_strategy_equipments"

    id = Column(Integer, primary_key=True)
    business_strategy_id = Column(
        Integer, ForeignKey("business_strategies.id"), index=True, nullable=False
    )
    equipment_id = Column(
        Integer, ForeignKey("equipments.id"), index=True, nullable=False
    )

    business_strategy = relationship("BusinessStrategy", back_populates="equipments")
    equipment = relationship("Equipment")


class RoiResult(Base):
    __tablename__ = "roi_results"

    id = Column(Integer, primary_key=True, index=True)
    roi_percentage = Column(Float, nullable=False)
    net_profit = Column(Integer, nullable=False)
    payback_period_years = Column(Float, nullable=False)
    total_revenue = Column(Integer, nullable=False)
    total_operating_cost = Column(Integer, nullable=False)
    financial_details_id = Column(
        Integer, ForeignKey("financial_details.id"), nullable=False
    )
    business_strategy_id = Column(
        Integer, ForeignKey("business_strategies.id"), nullable=True
    )
    created_at = Column(DateTime, server_default=func.now())

    financial_details = relationship("FinancialDetails")
    business_strategy = relationship("BusinessStrategy")
