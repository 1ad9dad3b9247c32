from django.urls import path
from .views import (
    AISettingsView,
    CartCurrencyView,
    CartItemDetailView,
    CartItemsView,
    CartView,
    CheckoutBackView,
    CheckoutCloseView,
    CheckoutPayView,
    CheckoutProceedView,
    CheckoutShippingView,
    HealthArticleView,
    PhotoDiagnosisView,
    SymptomDiagnosisView,
    TreatmentPlanView,
)

urlpatterns = [
    path('settings/ai/', AISettingsView.as_view(), name='ai-settings'),
    path('diagnosis/symptoms/', SymptomDiagnosisView.as_view(), name='diagnosis-symptoms'),
    path('diagnosis/photo/', PhotoDiagnosisView.as_view(), name='diagnosis-photo'),
    path('treatment-plans/', TreatmentPlanView.as_view(), name='treatment-plan'),
    path('articles/', HealthArticleView.as_view(), name='health-article'),
    path('cart/', CartView.as_view(), name='cart'),
    path('cart/items/', CartItemsView.as_view(), name='cart-items'),
    path('cart/items/<str:item_id>/', CartItemDetailView.as_view(), name='cart-item-detail'),
    path('cart/currency/', CartCurrencyView.as_view(), name='cart-currency'),
    path('checkout/proceed/', CheckoutProceedView.as_view(), name='checkout-proceed'),
    path('checkout/shipping/', CheckoutShippingView.as_view(), name='checkout-shipping'),
    path('checkout/back/', CheckoutBackView.as_view(), name='checkout-back'),
    path('checkout/pay/', CheckoutPayView.as_view(), name='checkout-pay'),
    path('checkout/close/', CheckoutCloseView.as_view(), name='checkout-close'),
]
